"""
BangunanPro AI Advisors - Gemini Client
=========================================
Minimal generateContent client over httpx.

    POST {base_url}/v1beta/models/{model}:generateContent
    x-goog-api-key: <key>
    {"contents": [{"parts": [{"text": prompt}]}]}
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from core.config.store_settings import (
    DEFAULT_ADVISOR_BASE_URL,
    DEFAULT_ADVISOR_MODEL,
    StoreSettings,
)
from core.errors import ConfigurationMissing, UpstreamFailure

logger = logging.getLogger("bangunan.ai")


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = DEFAULT_ADVISOR_MODEL,
        base_url: str = DEFAULT_ADVISOR_BASE_URL,
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key or None
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: StoreSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GeminiClient":
        return cls(
            settings.advisor_api_key,
            model=settings.advisor_model,
            base_url=settings.advisor_base_url,
            timeout_seconds=settings.advisor_timeout_seconds,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return self._api_key is not None

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str) -> str:
        if not self.configured:
            raise ConfigurationMissing("ADVISOR_API_KEY")

        path = f"/v1beta/models/{self._model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self._api_key}

        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(path, json=body, headers=headers)
            except httpx.HTTPError as exc:
                raise UpstreamFailure(
                    f"Network error while calling advisory model: {exc}"
                ) from exc

        if response.status_code >= 400:
            raise UpstreamFailure(
                f"Advisory model returned HTTP {response.status_code}.",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamFailure(
                "Advisory model returned a non-JSON body.",
                status_code=response.status_code,
            ) from exc

        return extract_text(payload)


def extract_text(payload: Any) -> str:
    """Concatenate the text parts of the first candidate; "" if none."""
    if not isinstance(payload, dict):
        raise _unexpected_payload()
    candidates = payload.get("candidates") or []
    if not isinstance(candidates, list):
        raise _unexpected_payload()
    if not candidates:
        return ""
    first: Dict[str, Any] = candidates[0] or {}
    if not isinstance(first, dict):
        raise _unexpected_payload()
    content = first.get("content") or {}
    if not isinstance(content, dict):
        raise _unexpected_payload()
    parts = content.get("parts") or []
    if not isinstance(parts, list):
        raise _unexpected_payload()

    texts = []
    for part in parts:
        if not isinstance(part, dict):
            raise _unexpected_payload()
        text = part.get("text", "")
        if not isinstance(text, str):
            raise _unexpected_payload()
        texts.append(text)
    return "".join(texts).strip()


def _unexpected_payload() -> UpstreamFailure:
    return UpstreamFailure("Advisory model returned an unexpected payload.")
