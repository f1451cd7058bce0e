"""
BangunanPro Core - Store Errors
=================================
Typed failures raised by engines and the advisory client.

Each error carries a stable code and converts into a RejectionReason
at the operation boundary. Cart clamps are NOT errors; they are
explicit no-op results (see engines.cart.models).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from core.commands.rejection import ReasonCode, RejectionReason


class StoreError(Exception):
    """Base error for store operations."""

    code: str = "STORE_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = dict(details or {})
        super().__init__(message)

    def to_rejection(self, policy_name: str) -> RejectionReason:
        return RejectionReason(
            code=self.code,
            message=self.message,
            policy_name=policy_name,
            details=self.details,
        )


class NotFound(StoreError):
    """Unknown product or transaction id."""

    code = ReasonCode.NOT_FOUND

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(
            f"{kind} '{identifier}' not found.",
            details={"kind": kind, "id": identifier},
        )


class InsufficientStock(StoreError):
    """Requested decrement exceeds available stock."""

    code = ReasonCode.INSUFFICIENT_STOCK

    def __init__(self, product_id: str, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for '{product_id}': "
            f"requested {requested}, available {available}.",
            details={
                "product_id": product_id,
                "requested": requested,
                "available": available,
            },
        )


class EmptyCart(StoreError):
    """Checkout attempted with no items."""

    code = ReasonCode.EMPTY_CART

    def __init__(self):
        super().__init__("Cannot check out an empty cart.")


class CustomerNameRequired(StoreError):
    """TEMPO checkout without a customer, when the store requires one."""

    code = ReasonCode.CUSTOMER_NAME_REQUIRED

    def __init__(self):
        super().__init__("customer_name is required for TEMPO payments.")


class AlreadySettled(StoreError):
    """Settlement attempted on a transaction that is not pending."""

    code = ReasonCode.ALREADY_SETTLED

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(
            f"Transaction '{transaction_id}' is already settled.",
            details={"transaction_id": transaction_id},
        )


class PermissionDenied(StoreError):
    """Actor role lacks the permission an operation requires."""

    code = ReasonCode.PERMISSION_DENIED

    def __init__(self, role: str, permission: str):
        self.role = role
        self.permission = permission
        super().__init__(
            f"Role '{role}' is not allowed to perform '{permission}'.",
            details={"role": role, "permission": permission},
        )


class ConfigurationMissing(StoreError):
    """Advisory interface lacks its credential."""

    code = ReasonCode.CONFIGURATION_MISSING

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(
            f"Advisory setting '{setting}' is not configured.",
            details={"setting": setting},
        )


class UpstreamFailure(StoreError):
    """Advisory service network or protocol error."""

    code = ReasonCode.UPSTREAM_FAILURE

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, details={"status_code": status_code})


__all__ = [
    "StoreError",
    "NotFound",
    "InsufficientStock",
    "EmptyCart",
    "CustomerNameRequired",
    "AlreadySettled",
    "PermissionDenied",
    "ConfigurationMissing",
    "UpstreamFailure",
]
