"""
BangunanPro HTTP API - Contracts
==================================
Framework-agnostic request/response DTOs for store endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from engines.retail.models import PaymentMethod

_PAYMENT_METHODS = frozenset(method.value for method in PaymentMethod)


def _require_id(value: Any, field_name: str) -> None:
    if not value or not isinstance(value, str):
        raise ValueError(f"{field_name} must be a non-empty string.")


def _require_int(value: Any, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer.")


@dataclass(frozen=True)
class ProductSearchRequest:
    query: Optional[str] = None

    def __post_init__(self):
        if self.query is not None and not isinstance(self.query, str):
            raise ValueError("query must be a string or None.")


@dataclass(frozen=True)
class RestockHttpRequest:
    product_id: str
    quantity: int

    def __post_init__(self):
        _require_id(self.product_id, "product_id")
        _require_int(self.quantity, "quantity")
        if self.quantity < 1:
            raise ValueError("quantity must be >= 1.")


@dataclass(frozen=True)
class CartAddHttpRequest:
    product_id: str

    def __post_init__(self):
        _require_id(self.product_id, "product_id")


@dataclass(frozen=True)
class CartUpdateHttpRequest:
    product_id: str
    delta: int

    def __post_init__(self):
        _require_id(self.product_id, "product_id")
        _require_int(self.delta, "delta")


@dataclass(frozen=True)
class CartRemoveHttpRequest:
    product_id: str

    def __post_init__(self):
        _require_id(self.product_id, "product_id")


@dataclass(frozen=True)
class CheckoutHttpRequest:
    payment_method: str
    amount_paid: int = 0
    customer_name: Optional[str] = None

    def __post_init__(self):
        if self.payment_method not in _PAYMENT_METHODS:
            raise ValueError(
                f"payment_method must be one of: {sorted(_PAYMENT_METHODS)}."
            )
        _require_int(self.amount_paid, "amount_paid")
        if self.amount_paid < 0:
            raise ValueError("amount_paid must be >= 0.")
        if self.customer_name is not None and not isinstance(self.customer_name, str):
            raise ValueError("customer_name must be a string or None.")


@dataclass(frozen=True)
class SettleDebtHttpRequest:
    transaction_id: str

    def __post_init__(self):
        _require_id(self.transaction_id, "transaction_id")


@dataclass(frozen=True)
class AdvisorAskHttpRequest:
    question: str

    def __post_init__(self):
        if not isinstance(self.question, str):
            raise ValueError("question must be a string.")


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    ok: bool
    data: Any = None
    error: Optional[HttpApiErrorBody] = None
    meta: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            payload = {"ok": True, "data": self.data}
            if self.meta:
                payload["meta"] = dict(self.meta)
            return payload
        if self.error is None:
            raise ValueError("error must be set when ok is False.")
        return {"ok": False, "error": self.error.to_dict()}
