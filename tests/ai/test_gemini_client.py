"""
Tests for ai.advisors.gemini_client - generateContent over httpx.
"""

import asyncio
import json

import httpx
import pytest

from ai.advisors.gemini_client import GeminiClient, extract_text
from core.config.store_settings import StoreSettings
from core.errors import ConfigurationMissing, UpstreamFailure


def _ok_payload(*texts):
    return {
        "candidates": [
            {"content": {"parts": [{"text": text} for text in texts]}}
        ]
    }


def _client(handler, api_key="test-key"):
    return GeminiClient(
        api_key,
        model="gemini-2.5-flash",
        base_url="https://gemini.test",
        transport=httpx.MockTransport(handler),
    )


class TestGenerate:
    def test_success_request_shape(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["key"] = request.headers.get("x-goog-api-key")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_ok_payload("Halo ", "dunia"))

        text = asyncio.run(_client(handler).generate("prompt text"))

        assert text == "Halo dunia"
        assert seen["method"] == "POST"
        assert seen["path"] == "/v1beta/models/gemini-2.5-flash:generateContent"
        assert seen["key"] == "test-key"
        assert seen["body"] == {"contents": [{"parts": [{"text": "prompt text"}]}]}

    def test_missing_key_raises_before_network(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=_ok_payload("x"))

        client = _client(handler, api_key="")
        assert client.configured is False
        with pytest.raises(ConfigurationMissing):
            asyncio.run(client.generate("p"))
        assert calls == []

    def test_http_error_status(self):
        client = _client(lambda request: httpx.Response(500, json={"error": "x"}))
        with pytest.raises(UpstreamFailure) as exc_info:
            asyncio.run(client.generate("p"))
        assert exc_info.value.status_code == 500

    def test_non_json_body(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(UpstreamFailure, match="non-JSON"):
            asyncio.run(client.generate("p"))

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamFailure, match="Network error"):
            asyncio.run(_client(handler).generate("p"))

    @pytest.mark.parametrize(
        "payload",
        [
            {"candidates": ["oops"]},
            {"candidates": [{"content": {"parts": [{"text": 5}]}}]},
        ],
    )
    def test_unexpected_shape_raises_upstream_failure(self, payload):
        client = _client(lambda request: httpx.Response(200, json=payload))
        with pytest.raises(UpstreamFailure, match="unexpected payload"):
            asyncio.run(client.generate("p"))

    def test_from_settings(self):
        settings = StoreSettings(advisor_api_key="k", advisor_model="gemini-x")
        client = GeminiClient.from_settings(settings)
        assert client.configured is True
        assert client.model == "gemini-x"


class TestExtractText:
    def test_no_candidates(self):
        assert extract_text({}) == ""
        assert extract_text({"candidates": []}) == ""

    def test_missing_parts(self):
        assert extract_text({"candidates": [{"content": {}}]}) == ""

    def test_strips_whitespace(self):
        assert extract_text(_ok_payload("  jawab  ")) == "jawab"

    def test_unexpected_payload(self):
        with pytest.raises(UpstreamFailure):
            extract_text(["not", "a", "dict"])

    @pytest.mark.parametrize(
        "payload",
        [
            {"candidates": "x"},
            {"candidates": ["oops"]},
            {"candidates": [{"content": []}]},
            {"candidates": [{"content": {"parts": "x"}}]},
            {"candidates": [{"content": {"parts": ["x"]}}]},
            {"candidates": [{"content": {"parts": [{"text": 5}]}}]},
        ],
    )
    def test_wrong_types_raise_upstream_failure(self, payload):
        with pytest.raises(UpstreamFailure, match="unexpected payload"):
            extract_text(payload)
