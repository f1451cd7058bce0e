"""
BangunanPro HTTP API - Dependencies
=====================================
Handler wiring: the store context plus auth and permission providers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.context.store_context import StoreContext
from core.http_api.auth.provider import AuthProvider
from core.permissions.evaluator import PermissionEvaluator


@dataclass(frozen=True)
class HttpApiDependencies:
    store: StoreContext
    auth_provider: AuthProvider
    permission_evaluator: PermissionEvaluator = field(default_factory=PermissionEvaluator)
