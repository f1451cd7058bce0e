"""
BangunanPro Permissions - Deterministic Permission Evaluator
=============================================================
Role checks happen at the operation boundary, not only in the UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from core.commands.rejection import ReasonCode
from core.errors import PermissionDenied
from core.permissions.models import DEFAULT_ROLES, LANDING_VIEWS, VIEW_PERMISSIONS, Role


@dataclass(frozen=True)
class PermissionEvaluationResult:
    allowed: bool
    rejection_code: Optional[str] = None
    message: str = ""


class PermissionEvaluator:
    def __init__(self, roles: Optional[Dict[str, Role]] = None):
        self._roles = dict(DEFAULT_ROLES if roles is None else roles)

    @staticmethod
    def _allow() -> PermissionEvaluationResult:
        return PermissionEvaluationResult(allowed=True)

    @staticmethod
    def _deny(code: str, message: str) -> PermissionEvaluationResult:
        return PermissionEvaluationResult(
            allowed=False,
            rejection_code=code,
            message=message,
        )

    def evaluate(self, actor_context, permission: str) -> PermissionEvaluationResult:
        if actor_context is None:
            return self._deny(
                ReasonCode.AUTH_REQUIRED,
                "Permission evaluation requires actor_context.",
            )

        role = self._roles.get(actor_context.role)
        if role is None:
            return self._deny(
                ReasonCode.PERMISSION_DENIED,
                f"Role '{actor_context.role}' is not configured.",
            )

        if not role.allows(permission):
            return self._deny(
                ReasonCode.PERMISSION_DENIED,
                f"Role '{role.role_id}' is not allowed to perform '{permission}'.",
            )

        return self._allow()

    def require(self, actor_context, permission: str) -> None:
        """Raise PermissionDenied unless the actor holds the permission."""
        result = self.evaluate(actor_context, permission)
        if not result.allowed:
            role = getattr(actor_context, "role", "ANONYMOUS")
            raise PermissionDenied(role, permission)

    def allowed_views(self, actor_context) -> tuple[str, ...]:
        return tuple(
            view
            for view, permission in VIEW_PERMISSIONS.items()
            if self.evaluate(actor_context, permission).allowed
        )

    @staticmethod
    def landing_view(actor_context) -> Optional[str]:
        return LANDING_VIEWS.get(actor_context.role)
