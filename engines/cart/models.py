"""
BangunanPro Cart Engine - Models
==================================
CartItem snapshots a Product at add time. Cart mutations report what
happened through CartMutationResult; silent clamps are explicit
NO_OP statuses so callers can tell "nothing happened" from an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from core.primitives.money import require_count
from engines.inventory.models import Product


class CartChange(Enum):
    ADDED = "ADDED"
    INCREMENTED = "INCREMENTED"
    UPDATED = "UPDATED"
    REMOVED = "REMOVED"
    CLEARED = "CLEARED"
    NO_OP_OUT_OF_STOCK = "NO_OP_OUT_OF_STOCK"
    NO_OP_EXCEEDS_STOCK = "NO_OP_EXCEEDS_STOCK"
    NO_OP_ABSENT = "NO_OP_ABSENT"


NO_OP_CHANGES = frozenset({
    CartChange.NO_OP_OUT_OF_STOCK,
    CartChange.NO_OP_EXCEEDS_STOCK,
    CartChange.NO_OP_ABSENT,
})


@dataclass(frozen=True)
class CartItem:
    product: Product
    quantity: int

    def __post_init__(self):
        if not isinstance(self.product, Product):
            raise ValueError("product must be Product.")
        require_count(self.quantity, "quantity", minimum=1)

    @property
    def product_id(self) -> str:
        return self.product.product_id

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def price(self) -> int:
        return self.product.price

    @property
    def cost(self) -> int:
        return self.product.cost

    @property
    def line_total(self) -> int:
        return self.product.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.product.to_dict(),
            "quantity": self.quantity,
            "line_total": self.line_total,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartItem":
        return cls(product=Product.from_dict(data), quantity=data["quantity"])


@dataclass(frozen=True)
class CartMutationResult:
    change: CartChange
    product_id: Optional[str] = None
    quantity: Optional[int] = None

    @property
    def applied(self) -> bool:
        return self.change not in NO_OP_CHANGES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "change": self.change.value,
            "applied": self.applied,
            "product_id": self.product_id,
            "quantity": self.quantity,
        }
