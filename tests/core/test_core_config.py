"""
Tests for core.config - StoreSettings.
"""

import pytest

from core.config.store_settings import (
    DEFAULT_ADVISOR_BASE_URL,
    DEFAULT_ADVISOR_MODEL,
    StoreSettings,
)


class TestStoreSettingsDefaults:
    def test_defaults(self):
        settings = StoreSettings()
        assert settings.generic_customer_name == "Umum"
        assert settings.require_tempo_customer_name is False
        assert settings.top_seller_count == 3
        assert settings.recent_sales_limit == 5
        assert settings.advisor_model == DEFAULT_ADVISOR_MODEL == "gemini-2.5-flash"
        assert settings.advisor_base_url == DEFAULT_ADVISOR_BASE_URL

    def test_advisor_not_configured_without_key(self):
        assert StoreSettings().advisor_configured is False
        assert StoreSettings(advisor_api_key="k").advisor_configured is True

    def test_rejects_blank_generic_customer(self):
        with pytest.raises(ValueError, match="generic_customer_name"):
            StoreSettings(generic_customer_name="")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError, match="advisor_timeout_seconds"):
            StoreSettings(advisor_timeout_seconds=0)


class TestStoreSettingsFromMapping:
    def test_reads_upper_case_keys(self):
        settings = StoreSettings.from_mapping({
            "BANGUNAN_STORE_NAME": "Toko Maju",
            "BANGUNAN_GENERIC_CUSTOMER": "Walk-in",
            "BANGUNAN_REQUIRE_TEMPO_CUSTOMER": "true",
            "ADVISOR_API_KEY": "secret",
            "ADVISOR_TIMEOUT_SECONDS": "5",
        })
        assert settings.store_name == "Toko Maju"
        assert settings.generic_customer_name == "Walk-in"
        assert settings.require_tempo_customer_name is True
        assert settings.advisor_api_key == "secret"
        assert settings.advisor_timeout_seconds == 5.0

    def test_missing_keys_keep_defaults(self):
        assert StoreSettings.from_mapping({}) == StoreSettings()

    def test_empty_api_key_is_none(self):
        settings = StoreSettings.from_mapping({"ADVISOR_API_KEY": ""})
        assert settings.advisor_api_key is None
