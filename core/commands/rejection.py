"""
BangunanPro Command Layer - Rejection Model
=============================================
Structured rejection reasons for denied store operations.

A rejection is an explanation structure, not an exception. Engines raise
typed errors (see core.errors); the operation boundary converts them into
a RejectionReason so the transport layer can render it.

Every rejection must be:
- Deterministic (same input -> same rejection)
- Machine-readable (code)
- Human-readable (message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


# ══════════════════════════════════════════════════════════════
# REJECTION REASON (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RejectionReason:
    """
    Structured reason for an operation rejection.

    Fields:
        code:        Machine-readable rejection code (e.g. 'EMPTY_CART').
        message:     Human-readable explanation.
        policy_name: Name of the policy or guard that caused rejection.
        details:     Optional machine-readable context (ids, quantities).
    """

    code: str
    message: str
    policy_name: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.policy_name or not isinstance(self.policy_name, str):
            raise ValueError("policy_name must be a non-empty string.")

        if self.details is not None:
            object.__setattr__(self, "details", dict(self.details))

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
            "details": dict(self.details or {}),
        }


# ══════════════════════════════════════════════════════════════
# STANDARD REJECTION CODES
# ══════════════════════════════════════════════════════════════

class ReasonCode:
    """
    Known rejection codes.

    Convention: SCREAMING_SNAKE_CASE.
    """

    # ── Lookup ────────────────────────────────────────────────
    NOT_FOUND = "NOT_FOUND"

    # ── Stock / checkout ──────────────────────────────────────
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    EMPTY_CART = "EMPTY_CART"
    CUSTOMER_NAME_REQUIRED = "CUSTOMER_NAME_REQUIRED"

    # ── Settlement ────────────────────────────────────────────
    ALREADY_SETTLED = "ALREADY_SETTLED"

    # ── Actor / authorization ─────────────────────────────────
    AUTH_REQUIRED = "AUTH_REQUIRED"
    PERMISSION_DENIED = "PERMISSION_DENIED"

    # ── Advisory interface ────────────────────────────────────
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"

    # ── Request structure ─────────────────────────────────────
    INVALID_REQUEST = "INVALID_REQUEST"
