"""
BangunanPro HTTP API Auth - Request Context Middleware Utility
===============================================================
Framework-agnostic authentication plus permission check.
"""

from __future__ import annotations

from typing import Any

from core.commands.rejection import RejectionReason
from core.context.actor_context import ActorContext
from core.http_api.auth.resolver import resolve_actor_context


def resolve_request_context(
    headers: dict[str, Any] | None,
    auth_provider,
    permission_evaluator,
    permission: str | None = None,
) -> ActorContext | RejectionReason:
    actor_context = resolve_actor_context(headers, auth_provider)
    if isinstance(actor_context, RejectionReason):
        return actor_context

    if permission is None:
        return actor_context

    result = permission_evaluator.evaluate(actor_context, permission)
    if not result.allowed:
        return RejectionReason(
            code=result.rejection_code,
            message=result.message,
            policy_name="http_api_permission_guard",
            details={"role": actor_context.role, "permission": permission},
        )
    return actor_context
