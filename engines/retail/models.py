"""
BangunanPro Retail Engine - Transaction Model
===============================================
RULES (NON-NEGOTIABLE):
- Line items are frozen copies, never live references to catalog products
- total is computed once at commit and never recomputed
- items, total and payment_method never change after creation
- only settlement may change amount_paid and status
- transactions are never deleted
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Tuple

from core.primitives.money import require_amount, require_count


class PaymentMethod(Enum):
    CASH = "CASH"
    TEMPO = "TEMPO"  # deferred / credit


class TransactionStatus(Enum):
    PAID = "PAID"
    PENDING = "PENDING"


def derive_status(
    payment_method: PaymentMethod, amount_paid: int, total: int
) -> TransactionStatus:
    """PAID for cash sales or when the amount received covers the total."""
    if payment_method == PaymentMethod.CASH or amount_paid >= total:
        return TransactionStatus.PAID
    return TransactionStatus.PENDING


@dataclass(frozen=True)
class LineItem:
    product_id: str
    name: str
    price: int
    cost: int
    quantity: int

    def __post_init__(self):
        if not self.product_id:
            raise ValueError("product_id must be non-empty.")
        if not self.name:
            raise ValueError("name must be non-empty.")
        require_amount(self.price, "price")
        require_amount(self.cost, "cost")
        require_count(self.quantity, "quantity", minimum=1)

    @property
    def line_total(self) -> int:
        return self.price * self.quantity

    @property
    def line_cost(self) -> int:
        return self.cost * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "price": self.price,
            "cost": self.cost,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        return cls(
            product_id=data["product_id"],
            name=data["name"],
            price=data["price"],
            cost=data["cost"],
            quantity=data["quantity"],
        )


@dataclass(frozen=True)
class Transaction:
    transaction_id: str
    created_at: datetime
    items: Tuple[LineItem, ...]
    total: int
    payment_method: PaymentMethod
    customer_name: str
    cashier_name: str
    status: TransactionStatus
    amount_paid: int = 0
    settled_at: datetime | None = field(default=None)

    def __post_init__(self):
        if not self.transaction_id:
            raise ValueError("transaction_id must be non-empty.")
        if not isinstance(self.created_at, datetime) or self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware datetime.")
        if not isinstance(self.items, tuple) or len(self.items) == 0:
            raise ValueError("items must be non-empty tuple.")
        for item in self.items:
            if not isinstance(item, LineItem):
                raise ValueError("items must contain LineItem values.")
        if not isinstance(self.payment_method, PaymentMethod):
            raise ValueError("payment_method must be PaymentMethod.")
        if not isinstance(self.status, TransactionStatus):
            raise ValueError("status must be TransactionStatus.")
        require_amount(self.total, "total")
        require_amount(self.amount_paid, "amount_paid")
        if self.total != sum(item.line_total for item in self.items):
            raise ValueError("total must equal the sum of line totals.")
        expected = derive_status(self.payment_method, self.amount_paid, self.total)
        if self.status != expected:
            raise ValueError(
                f"status {self.status.value} inconsistent with payment "
                f"(expected {expected.value})."
            )

    @property
    def is_debt(self) -> bool:
        return (
            self.payment_method == PaymentMethod.TEMPO
            and self.status == TransactionStatus.PENDING
        )

    @property
    def outstanding_balance(self) -> int:
        return self.total - self.amount_paid

    @property
    def change_due(self) -> int:
        return max(0, self.amount_paid - self.total)

    @property
    def total_cost(self) -> int:
        return sum(item.line_cost for item in self.items)

    @property
    def profit(self) -> int:
        return self.total - self.total_cost

    def settled(self, settled_at: datetime) -> "Transaction":
        return replace(
            self,
            amount_paid=self.total,
            status=TransactionStatus.PAID,
            settled_at=settled_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transaction_id": self.transaction_id,
            "created_at": self.created_at.isoformat(),
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "payment_method": self.payment_method.value,
            "customer_name": self.customer_name,
            "cashier_name": self.cashier_name,
            "status": self.status.value,
            "amount_paid": self.amount_paid,
            "settled_at": None if self.settled_at is None else self.settled_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        settled_at = data.get("settled_at")
        return cls(
            transaction_id=data["transaction_id"],
            created_at=datetime.fromisoformat(data["created_at"]),
            items=tuple(LineItem.from_dict(item) for item in data["items"]),
            total=data["total"],
            payment_method=PaymentMethod(data["payment_method"]),
            customer_name=data.get("customer_name", ""),
            cashier_name=data["cashier_name"],
            status=TransactionStatus(data["status"]),
            amount_paid=data.get("amount_paid", 0),
            settled_at=None if settled_at is None else datetime.fromisoformat(settled_at),
        )
