"""
BangunanPro Core Primitives
=============================
Pure Python, engine-agnostic building blocks.

Primitives:
    money  - integer rupiah validation and display formatting
"""

from core.primitives.money import (
    CURRENCY,
    CURRENCY_SYMBOL,
    format_rupiah,
    require_amount,
    require_count,
)

__all__ = [
    "CURRENCY",
    "CURRENCY_SYMBOL",
    "format_rupiah",
    "require_amount",
    "require_count",
]
