"""
BangunanPro HTTP API Auth - Public API
=======================================
"""

from core.http_api.auth.middleware import resolve_request_context
from core.http_api.auth.provider import (
    AuthPrincipal,
    AuthProvider,
    InMemoryAuthProvider,
)
from core.http_api.auth.resolver import (
    HEADER_API_KEY,
    resolve_actor_context,
    resolve_auth_principal,
)

__all__ = [
    "AuthPrincipal",
    "AuthProvider",
    "HEADER_API_KEY",
    "InMemoryAuthProvider",
    "resolve_actor_context",
    "resolve_auth_principal",
    "resolve_request_context",
]
