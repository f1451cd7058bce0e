"""
BangunanPro Django HTTP adapter.
Thin framework glue over core/http_api handlers.
"""

from adapters.django_api.wiring import (
    DEV_ADMIN_API_KEY,
    DEV_GUDANG_API_KEY,
    DEV_KASIR_API_KEY,
    build_dependencies,
    reset_dependencies,
)

__all__ = [
    "DEV_ADMIN_API_KEY",
    "DEV_GUDANG_API_KEY",
    "DEV_KASIR_API_KEY",
    "build_dependencies",
    "reset_dependencies",
]
