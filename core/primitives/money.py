"""
BangunanPro Money Primitive - Integer Rupiah
==============================================
RULES (NON-NEGOTIABLE):
- All amounts are integer rupiah. NO floats.
- Single currency (IDR), zero decimal places.
- Formatting is presentation only; arithmetic never sees strings.
"""

from __future__ import annotations

CURRENCY = "IDR"
CURRENCY_SYMBOL = "Rp"


def require_amount(value, field_name: str) -> int:
    """Validate a non-negative integer amount and return it."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            f"{field_name} must be int (rupiah), "
            f"got {type(value).__name__}."
        )
    if value < 0:
        raise ValueError(f"{field_name} must be >= 0, got {value}.")
    return value


def require_count(value, field_name: str, *, minimum: int = 0) -> int:
    """Validate an integer quantity with a lower bound and return it."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            f"{field_name} must be int, got {type(value).__name__}."
        )
    if value < minimum:
        raise ValueError(f"{field_name} must be >= {minimum}, got {value}.")
    return value


def format_rupiah(amount: int) -> str:
    """
    Render an amount the way id-ID currency formatting does.

        format_rupiah(130000)  -> "Rp 130.000"
        format_rupiah(-5000)   -> "-Rp 5.000"
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(
            f"amount must be int (rupiah), got {type(amount).__name__}."
        )
    grouped = f"{abs(amount):,}".replace(",", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {grouped}"
