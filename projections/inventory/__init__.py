"""
BangunanPro Projections - Inventory Read Model
===============================================
Per-product stock badge for the warehouse view.
"""

from __future__ import annotations

from typing import Any, Dict, List

from engines.inventory.models import Product

STOCK_OUT = "OUT_OF_STOCK"
STOCK_LOW = "LOW"
STOCK_OK = "OK"

# shown in the warehouse table
STOCK_LABELS: Dict[str, str] = {
    STOCK_OUT: "Habis",
    STOCK_LOW: "Menipis",
    STOCK_OK: "Aman",
}


def stock_status(product: Product) -> str:
    if product.stock <= 0:
        return STOCK_OUT
    if product.stock <= product.min_stock:
        return STOCK_LOW
    return STOCK_OK


def inventory_rows(catalog) -> List[Dict[str, Any]]:
    rows = []
    for product in catalog.list_products():
        status = stock_status(product)
        rows.append({
            **product.to_dict(),
            "status": status,
            "status_label": STOCK_LABELS[status],
        })
    return rows
