from __future__ import annotations

import pytest

from core.commands.rejection import ReasonCode
from core.context.actor_context import ActorContext
from core.errors import PermissionDenied
from core.permissions import (
    DEFAULT_ROLES,
    PERMISSION_ADVISOR_ASK,
    PERMISSION_CATALOG_VIEW,
    PERMISSION_DASHBOARD_VIEW,
    PERMISSION_DEBT_SETTLE,
    PERMISSION_DEBT_VIEW,
    PERMISSION_INVENTORY_ADJUST,
    PERMISSION_INVENTORY_VIEW,
    PERMISSION_POS_SELL,
    PERMISSION_TRANSACTIONS_VIEW,
    ROLE_ADMIN,
    ROLE_GUDANG,
    ROLE_KASIR,
    VALID_PERMISSIONS,
    PermissionEvaluator,
    Role,
)


ADMIN = ActorContext(actor_id="1", actor_name="Budi (Admin)", role=ROLE_ADMIN)
KASIR = ActorContext(actor_id="2", actor_name="Siti (Kasir)", role=ROLE_KASIR)
GUDANG = ActorContext(actor_id="3", actor_name="Joko (Gudang)", role=ROLE_GUDANG)

EXPECTED = {
    PERMISSION_CATALOG_VIEW: {ROLE_ADMIN, ROLE_KASIR, ROLE_GUDANG},
    PERMISSION_POS_SELL: {ROLE_ADMIN, ROLE_KASIR},
    PERMISSION_TRANSACTIONS_VIEW: {ROLE_ADMIN, ROLE_KASIR},
    PERMISSION_INVENTORY_VIEW: {ROLE_ADMIN, ROLE_GUDANG},
    PERMISSION_INVENTORY_ADJUST: {ROLE_ADMIN, ROLE_GUDANG},
    PERMISSION_DEBT_VIEW: {ROLE_ADMIN, ROLE_KASIR, ROLE_GUDANG},
    PERMISSION_DEBT_SETTLE: {ROLE_ADMIN, ROLE_KASIR},
    PERMISSION_DASHBOARD_VIEW: {ROLE_ADMIN},
    PERMISSION_ADVISOR_ASK: {ROLE_ADMIN},
}


def test_permission_table_matches_role_sets() -> None:
    assert set(EXPECTED) == set(VALID_PERMISSIONS)
    evaluator = PermissionEvaluator()
    for permission, allowed_roles in EXPECTED.items():
        for actor in (ADMIN, KASIR, GUDANG):
            result = evaluator.evaluate(actor, permission)
            assert result.allowed is (actor.role in allowed_roles), (permission, actor.role)


def test_denial_carries_permission_denied_code() -> None:
    result = PermissionEvaluator().evaluate(GUDANG, PERMISSION_POS_SELL)
    assert result.allowed is False
    assert result.rejection_code == ReasonCode.PERMISSION_DENIED
    assert "GUDANG" in result.message


def test_missing_actor_requires_auth() -> None:
    result = PermissionEvaluator().evaluate(None, PERMISSION_CATALOG_VIEW)
    assert result.allowed is False
    assert result.rejection_code == ReasonCode.AUTH_REQUIRED


def test_require_raises_permission_denied() -> None:
    evaluator = PermissionEvaluator()
    evaluator.require(KASIR, PERMISSION_DEBT_SETTLE)
    with pytest.raises(PermissionDenied) as excinfo:
        evaluator.require(KASIR, PERMISSION_DASHBOARD_VIEW)
    assert excinfo.value.details == {"role": ROLE_KASIR, "permission": PERMISSION_DASHBOARD_VIEW}


def test_landing_views_per_role() -> None:
    assert PermissionEvaluator.landing_view(KASIR) == "POS"
    assert PermissionEvaluator.landing_view(GUDANG) == "INVENTORY"
    assert PermissionEvaluator.landing_view(ADMIN) == "DASHBOARD"


def test_allowed_views_per_role() -> None:
    evaluator = PermissionEvaluator()
    assert set(evaluator.allowed_views(ADMIN)) == {
        "DASHBOARD", "POS", "INVENTORY", "TRANSACTIONS", "DEBTS",
    }
    assert set(evaluator.allowed_views(KASIR)) == {"POS", "TRANSACTIONS", "DEBTS"}
    assert set(evaluator.allowed_views(GUDANG)) == {"INVENTORY", "DEBTS"}


def test_custom_role_table_is_respected() -> None:
    read_only = Role(role_id=ROLE_KASIR, permissions=(PERMISSION_CATALOG_VIEW,))
    evaluator = PermissionEvaluator(roles={**DEFAULT_ROLES, ROLE_KASIR: read_only})
    assert evaluator.evaluate(KASIR, PERMISSION_POS_SELL).allowed is False


def test_role_normalizes_and_validates_permissions() -> None:
    role = Role(role_id=ROLE_GUDANG, permissions=("inventory.view", "catalog.view", "inventory.view"))
    assert role.permissions == ("catalog.view", "inventory.view")
    with pytest.raises(ValueError, match="not valid"):
        Role(role_id=ROLE_GUDANG, permissions=("inventory.delete",))
    with pytest.raises(ValueError, match="role_id"):
        Role(role_id="OWNER", permissions=(PERMISSION_CATALOG_VIEW,))


def test_actor_context_rejects_unknown_role() -> None:
    with pytest.raises(ValueError, match="role 'OWNER' not valid"):
        ActorContext(actor_id="9", actor_name="Nobody", role="OWNER")
