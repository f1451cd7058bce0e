"""
Tests for core.primitives.money - integer rupiah helpers.
"""

import pytest

from core.primitives.money import format_rupiah, require_amount, require_count


class TestRequireAmount:
    def test_accepts_zero_and_positive(self):
        assert require_amount(0, "price") == 0
        assert require_amount(65000, "price") == 65000

    def test_rejects_negative(self):
        with pytest.raises(ValueError, match="price must be >= 0"):
            require_amount(-1, "price")

    def test_rejects_float(self):
        with pytest.raises(ValueError, match="must be int"):
            require_amount(1.5, "price")

    def test_rejects_bool(self):
        with pytest.raises(ValueError, match="must be int"):
            require_amount(True, "price")


class TestRequireCount:
    def test_minimum_enforced(self):
        assert require_count(1, "quantity", minimum=1) == 1
        with pytest.raises(ValueError, match="quantity must be >= 1"):
            require_count(0, "quantity", minimum=1)

    def test_rejects_string(self):
        with pytest.raises(ValueError, match="must be int"):
            require_count("3", "quantity")


class TestFormatRupiah:
    def test_thousands_separator_is_dot(self):
        assert format_rupiah(130000) == "Rp 130.000"
        assert format_rupiah(1250000) == "Rp 1.250.000"

    def test_small_and_zero(self):
        assert format_rupiah(800) == "Rp 800"
        assert format_rupiah(0) == "Rp 0"

    def test_negative_profit(self):
        assert format_rupiah(-5000) == "-Rp 5.000"

    def test_rejects_non_int(self):
        with pytest.raises(ValueError):
            format_rupiah(10.0)
