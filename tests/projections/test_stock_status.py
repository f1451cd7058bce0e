"""
Tests - Inventory Read Model
==============================
"""

from __future__ import annotations

import pytest

from engines.inventory.models import Product
from engines.inventory.services import CatalogStore
from projections.inventory import (
    STOCK_LOW,
    STOCK_OK,
    STOCK_OUT,
    inventory_rows,
    stock_status,
)


def _product(stock, min_stock=10):
    return Product("P1", "Semen", "Material Dasar", "Sak", 65000, 58000, stock, min_stock)


@pytest.mark.parametrize(
    "stock, expected",
    [(0, STOCK_OUT), (1, STOCK_LOW), (10, STOCK_LOW), (11, STOCK_OK)],
)
def test_stock_status(stock, expected):
    assert stock_status(_product(stock)) == expected


def test_zero_minimum_zero_stock_is_out():
    assert stock_status(_product(0, min_stock=0)) == STOCK_OUT


def test_inventory_rows_labels():
    catalog = CatalogStore([
        Product("1", "Semen", "Material Dasar", "Sak", 65000, 58000, 150, 20),
        Product("2", "Cat", "Cat & Pelapis", "Kaleng", 145000, 120000, 5, 5),
        Product("6", "Pasir", "Material Dasar", "Truk", 1500000, 1200000, 0, 1),
    ])
    rows = inventory_rows(catalog)
    assert [r["status_label"] for r in rows] == ["Aman", "Menipis", "Habis"]
    assert rows[0]["product_id"] == "1"
    assert rows[0]["stock"] == 150
