"""
Tests - Catalog Store
======================
Product lookup, stock adjustment, pre-flight availability checks.
"""

from __future__ import annotations

import pytest

from core.errors import InsufficientStock, NotFound
from engines.inventory.models import Product
from engines.inventory.services import CatalogStore


def _product(product_id="1", name="Semen Tiga Roda 50kg", stock=150, **overrides) -> Product:
    values = dict(
        product_id=product_id,
        name=name,
        category="Material Dasar",
        unit="Sak",
        price=65000,
        cost=58000,
        stock=stock,
        min_stock=20,
    )
    values.update(overrides)
    return Product(**values)


def _catalog() -> CatalogStore:
    return CatalogStore([
        _product("1", "Semen Tiga Roda 50kg", 150),
        _product("3", "Paku Beton 5cm", 8, unit="Box", price=25000, cost=15000, min_stock=10),
        _product("5", "Bata Merah", 5000, unit="Pcs", price=800, cost=600, min_stock=1000),
    ])


# ══════════════════════════════════════════════════════════════
# PRODUCT MODEL
# ══════════════════════════════════════════════════════════════


class TestProduct:
    def test_low_stock_at_threshold(self):
        assert _product(stock=20).is_low_stock is True
        assert _product(stock=21).is_low_stock is False

    def test_rejects_negative_stock(self):
        with pytest.raises(ValueError, match="stock must be >= 0"):
            _product(stock=-1)

    def test_rejects_float_price(self):
        with pytest.raises(ValueError, match="price must be int"):
            _product(price=65000.0)

    def test_cost_above_price_is_allowed(self):
        assert _product(price=100, cost=200).cost == 200

    def test_dict_round_trip_preserves_fields(self):
        product = _product()
        assert Product.from_dict(product.to_dict()) == product


# ══════════════════════════════════════════════════════════════
# READS
# ══════════════════════════════════════════════════════════════


class TestReads:
    def test_list_in_insertion_order(self):
        assert [p.product_id for p in _catalog().list_products()] == ["1", "3", "5"]

    def test_search_is_case_insensitive_substring(self):
        found = _catalog().list_products("bata")
        assert [p.name for p in found] == ["Bata Merah"]

    def test_blank_search_returns_all(self):
        assert len(_catalog().list_products("")) == 3

    def test_get_unknown_raises_not_found(self):
        with pytest.raises(NotFound):
            _catalog().get("99")

    def test_stock_of_unknown_is_zero(self):
        catalog = _catalog()
        assert catalog.stock_of("99") == 0
        assert catalog.stock_of("3") == 8

    def test_duplicate_register_rejected(self):
        catalog = _catalog()
        with pytest.raises(ValueError, match="already registered"):
            catalog.register(_product("1"))


# ══════════════════════════════════════════════════════════════
# WRITES
# ══════════════════════════════════════════════════════════════


class TestAdjustStock:
    def test_decrement_returns_new_stock(self):
        catalog = _catalog()
        assert catalog.adjust_stock("1", -2) == 148
        assert catalog.get("1").stock == 148

    def test_cannot_go_negative(self):
        catalog = _catalog()
        with pytest.raises(InsufficientStock) as excinfo:
            catalog.adjust_stock("3", -9)
        assert excinfo.value.available == 8
        assert catalog.get("3").stock == 8

    def test_to_exactly_zero_is_allowed(self):
        catalog = _catalog()
        assert catalog.adjust_stock("3", -8) == 0

    def test_unknown_product(self):
        with pytest.raises(NotFound):
            _catalog().adjust_stock("99", 1)

    def test_rejects_non_int_delta(self):
        with pytest.raises(ValueError, match="delta must be int"):
            _catalog().adjust_stock("1", 1.0)

    def test_restock_adds_quantity(self):
        catalog = _catalog()
        assert catalog.restock("3", 12) == 20

    def test_restock_requires_positive_quantity(self):
        with pytest.raises(ValueError, match="quantity must be >= 1"):
            _catalog().restock("3", 0)

    def test_update_pricing_keeps_stock(self):
        catalog = _catalog()
        catalog.adjust_stock("1", -10)
        updated = catalog.update_pricing("1", price=70000)
        assert updated.price == 70000
        assert updated.cost == 58000
        assert updated.stock == 140


class TestCheckAvailability:
    def test_passes_when_all_lines_fit(self):
        _catalog().check_availability([("1", 150), ("3", 8)])

    def test_sums_quantities_per_product(self):
        catalog = _catalog()
        with pytest.raises(InsufficientStock) as excinfo:
            catalog.check_availability([("3", 5), ("3", 4)])
        assert excinfo.value.requested == 9

    def test_never_mutates(self):
        catalog = _catalog()
        with pytest.raises(InsufficientStock):
            catalog.check_availability([("1", 2), ("3", 9)])
        assert catalog.get("1").stock == 150
        assert catalog.get("3").stock == 8

    def test_unknown_product_raises_not_found(self):
        with pytest.raises(NotFound):
            _catalog().check_availability([("99", 1)])
