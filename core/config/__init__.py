"""
BangunanPro Core Config - Public API
======================================
Store settings injected into engines and the advisory client.
"""

from core.config.store_settings import (
    DEFAULT_ADVISOR_BASE_URL,
    DEFAULT_ADVISOR_MODEL,
    StoreSettings,
)

__all__ = [
    "DEFAULT_ADVISOR_BASE_URL",
    "DEFAULT_ADVISOR_MODEL",
    "StoreSettings",
]
