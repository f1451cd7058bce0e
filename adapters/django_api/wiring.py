"""
BangunanPro Django Adapter Wiring
===================================
Constructs HttpApiDependencies for local/staging live runs.

This module is adapter-only glue:
- one StoreContext per process, built lazily
- store settings read from django.conf.settings
- dev API keys stand in for the mock role picker
"""

from __future__ import annotations

import threading

from django.conf import settings as django_settings

from adapters.django_api.seed import SEED_PRODUCTS, seed_transactions
from core.config.store_settings import StoreSettings
from core.context.store_context import StoreContext
from core.http_api.auth import AuthPrincipal, InMemoryAuthProvider
from core.http_api.dependencies import HttpApiDependencies
from core.permissions import ROLE_ADMIN, ROLE_GUDANG, ROLE_KASIR, PermissionEvaluator
from core.time.clock import SystemClock

DEV_ADMIN_API_KEY = "dev-admin-key"
DEV_KASIR_API_KEY = "dev-kasir-key"
DEV_GUDANG_API_KEY = "dev-gudang-key"

_STORE_SETTING_KEYS = (
    "BANGUNAN_STORE_NAME",
    "BANGUNAN_STORE_DESCRIPTION",
    "BANGUNAN_GENERIC_CUSTOMER",
    "BANGUNAN_REQUIRE_TEMPO_CUSTOMER",
    "BANGUNAN_TOP_SELLER_COUNT",
    "BANGUNAN_RECENT_SALES_LIMIT",
    "ADVISOR_API_KEY",
    "ADVISOR_MODEL",
    "ADVISOR_BASE_URL",
    "ADVISOR_TIMEOUT_SECONDS",
)

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: HttpApiDependencies | None = None


def build_store_settings() -> StoreSettings:
    values = {
        key: getattr(django_settings, key)
        for key in _STORE_SETTING_KEYS
        if hasattr(django_settings, key)
    }
    return StoreSettings.from_mapping(values)


def _build_auth_provider() -> InMemoryAuthProvider:
    return InMemoryAuthProvider(
        {
            DEV_ADMIN_API_KEY: AuthPrincipal(
                actor_id="1", actor_name="Budi (Admin)", role=ROLE_ADMIN
            ),
            DEV_KASIR_API_KEY: AuthPrincipal(
                actor_id="2", actor_name="Siti (Kasir)", role=ROLE_KASIR
            ),
            DEV_GUDANG_API_KEY: AuthPrincipal(
                actor_id="3", actor_name="Joko (Gudang)", role=ROLE_GUDANG
            ),
        }
    )


def _create_dependencies() -> HttpApiDependencies:
    clock = SystemClock()
    store = StoreContext(
        settings=build_store_settings(),
        clock=clock,
        products=SEED_PRODUCTS,
    )
    for transaction in seed_transactions(clock.now_utc()):
        store.ledger.record(transaction)

    return HttpApiDependencies(
        store=store,
        auth_provider=_build_auth_provider(),
        permission_evaluator=PermissionEvaluator(),
    )


def build_dependencies() -> HttpApiDependencies:
    """
    Lazy singleton wiring for adapter runtime.
    """
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES = _create_dependencies()
        return _DEPENDENCIES


def reset_dependencies() -> None:
    """Drop the process store; the next request rebuilds it from seed."""
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None
