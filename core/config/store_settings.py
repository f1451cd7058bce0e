"""
BangunanPro Core Config - Store Settings
==========================================
Engine code never reads Django settings. The adapter builds a
StoreSettings from whatever mapping it has (django.conf.settings,
os.environ, a test dict) and injects it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_ADVISOR_MODEL = "gemini-2.5-flash"
DEFAULT_ADVISOR_BASE_URL = "https://generativelanguage.googleapis.com"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class StoreSettings:
    """Store-level configuration."""

    store_name: str = "BangunanPro"
    store_description: str = "Building Material Store (Toko Bangunan)"
    generic_customer_name: str = "Umum"
    require_tempo_customer_name: bool = False
    top_seller_count: int = 3
    recent_sales_limit: int = 5
    advisor_api_key: Optional[str] = None
    advisor_model: str = DEFAULT_ADVISOR_MODEL
    advisor_base_url: str = DEFAULT_ADVISOR_BASE_URL
    advisor_timeout_seconds: float = 20.0

    def __post_init__(self) -> None:
        if not self.store_name or not isinstance(self.store_name, str):
            raise ValueError("store_name must be a non-empty string.")
        if not self.generic_customer_name or not isinstance(self.generic_customer_name, str):
            raise ValueError("generic_customer_name must be a non-empty string.")
        if self.top_seller_count < 1:
            raise ValueError("top_seller_count must be >= 1.")
        if self.recent_sales_limit < 1:
            raise ValueError("recent_sales_limit must be >= 1.")
        if self.advisor_timeout_seconds <= 0:
            raise ValueError("advisor_timeout_seconds must be > 0.")

    @property
    def advisor_configured(self) -> bool:
        return bool(self.advisor_api_key)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "StoreSettings":
        """
        Build settings from upper-case keys, e.g. django.conf.settings
        attributes collected into a dict. Missing keys keep defaults.
        """
        defaults = cls()
        api_key = values.get("ADVISOR_API_KEY") or None
        return cls(
            store_name=values.get("BANGUNAN_STORE_NAME", defaults.store_name),
            store_description=values.get(
                "BANGUNAN_STORE_DESCRIPTION", defaults.store_description
            ),
            generic_customer_name=values.get(
                "BANGUNAN_GENERIC_CUSTOMER", defaults.generic_customer_name
            ),
            require_tempo_customer_name=_as_bool(
                values.get(
                    "BANGUNAN_REQUIRE_TEMPO_CUSTOMER",
                    defaults.require_tempo_customer_name,
                )
            ),
            top_seller_count=int(
                values.get("BANGUNAN_TOP_SELLER_COUNT", defaults.top_seller_count)
            ),
            recent_sales_limit=int(
                values.get("BANGUNAN_RECENT_SALES_LIMIT", defaults.recent_sales_limit)
            ),
            advisor_api_key=api_key,
            advisor_model=values.get("ADVISOR_MODEL", defaults.advisor_model),
            advisor_base_url=values.get("ADVISOR_BASE_URL", defaults.advisor_base_url),
            advisor_timeout_seconds=float(
                values.get(
                    "ADVISOR_TIMEOUT_SECONDS", defaults.advisor_timeout_seconds
                )
            ),
        )
