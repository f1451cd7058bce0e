"""
BangunanPro Inventory Engine - Product Model
==============================================
A Product is immutable; stock changes replace the stored instance.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict

from core.primitives.money import require_amount, require_count


@dataclass(frozen=True)
class Product:
    """
    Catalog product.

    price is the selling price, cost the acquisition price. cost <= price
    is typical but not enforced. unit is display-only ("Sak", "Pcs").
    """

    product_id: str
    name: str
    category: str
    unit: str
    price: int
    cost: int
    stock: int
    min_stock: int

    def __post_init__(self):
        if not self.product_id or not isinstance(self.product_id, str):
            raise ValueError("product_id must be a non-empty string.")
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")
        if not isinstance(self.category, str):
            raise ValueError("category must be a string.")
        if not isinstance(self.unit, str):
            raise ValueError("unit must be a string.")
        require_amount(self.price, "price")
        require_amount(self.cost, "cost")
        require_count(self.stock, "stock")
        require_count(self.min_stock, "min_stock")

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.min_stock

    def with_stock(self, stock: int) -> "Product":
        return replace(self, stock=stock)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "category": self.category,
            "unit": self.unit,
            "price": self.price,
            "cost": self.cost,
            "stock": self.stock,
            "min_stock": self.min_stock,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            product_id=data["product_id"],
            name=data["name"],
            category=data.get("category", ""),
            unit=data.get("unit", ""),
            price=data["price"],
            cost=data["cost"],
            stock=data["stock"],
            min_stock=data.get("min_stock", 0),
        )
