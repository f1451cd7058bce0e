"""
BangunanPro HTTP API Auth - Provider and Principal Models
==========================================================
Deterministic API-key principal resolution. Each key stands for one
mock staff member; there is no password or session layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol

from core.permissions.constants import VALID_ROLES


@dataclass(frozen=True)
class AuthPrincipal:
    actor_id: str
    actor_name: str
    role: str

    def __post_init__(self):
        if not self.actor_id or not isinstance(self.actor_id, str):
            raise ValueError("actor_id must be a non-empty string.")
        if not self.actor_name or not isinstance(self.actor_name, str):
            raise ValueError("actor_name must be a non-empty string.")
        if self.role not in VALID_ROLES:
            raise ValueError(
                f"role '{self.role}' not valid. "
                f"Must be one of: {sorted(VALID_ROLES)}"
            )


class AuthProvider(Protocol):
    def resolve_api_key(self, api_key: str) -> AuthPrincipal | None:
        ...


class InMemoryAuthProvider:
    """
    Deterministic in-memory auth provider for tests/bootstrap.
    """

    def __init__(self, api_key_to_principal: Mapping[str, AuthPrincipal] | None = None):
        normalized: dict[str, AuthPrincipal] = {}
        for api_key, principal in sorted(
            dict(api_key_to_principal or {}).items(),
            key=lambda item: item[0],
        ):
            if not isinstance(api_key, str) or not api_key.strip():
                raise ValueError("API key must be a non-empty string.")
            if not isinstance(principal, AuthPrincipal):
                raise ValueError("Principal must be AuthPrincipal.")
            normalized[api_key] = principal
        self._api_key_to_principal = normalized

    def resolve_api_key(self, api_key: str) -> AuthPrincipal | None:
        if not isinstance(api_key, str):
            return None
        return self._api_key_to_principal.get(api_key)

    def principals(self) -> tuple[AuthPrincipal, ...]:
        return tuple(self._api_key_to_principal.values())
