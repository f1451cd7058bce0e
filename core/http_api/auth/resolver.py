"""
BangunanPro HTTP API Auth - Context Resolvers
==============================================
Resolve the acting staff member from request headers.
"""

from __future__ import annotations

from typing import Any

from core.commands.rejection import ReasonCode, RejectionReason
from core.context.actor_context import ActorContext
from core.http_api.auth.provider import AuthPrincipal

HEADER_API_KEY = "x-api-key"


def _normalize_headers(headers: dict[str, Any] | None) -> dict[str, str]:
    normalized: dict[str, str] = {}
    for key, value in (headers or {}).items():
        normalized_key = str(key).strip().lower()
        normalized_value = str(value).strip()
        normalized[normalized_key] = normalized_value
    return normalized


def _reject(code: str, message: str) -> RejectionReason:
    return RejectionReason(
        code=code,
        message=message,
        policy_name="http_api_auth_resolver",
    )


def resolve_auth_principal(
    headers: dict[str, Any] | None,
    provider,
) -> AuthPrincipal | RejectionReason:
    normalized_headers = _normalize_headers(headers)
    api_key = normalized_headers.get(HEADER_API_KEY)
    if not api_key:
        return _reject(
            ReasonCode.AUTH_REQUIRED,
            "Missing required header X-API-KEY.",
        )

    principal = provider.resolve_api_key(api_key)
    if principal is None:
        return _reject(
            ReasonCode.AUTH_REQUIRED,
            "Invalid API key.",
        )
    return principal


def resolve_actor_context_from_principal(principal: AuthPrincipal) -> ActorContext:
    return ActorContext(
        actor_id=principal.actor_id,
        actor_name=principal.actor_name,
        role=principal.role,
    )


def resolve_actor_context(
    headers: dict[str, Any] | None,
    provider,
) -> ActorContext | RejectionReason:
    principal = resolve_auth_principal(headers, provider)
    if isinstance(principal, RejectionReason):
        return principal
    return resolve_actor_context_from_principal(principal)
