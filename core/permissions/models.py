"""
BangunanPro Permissions - Immutable Role Models
=================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from core.permissions.constants import (
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
    VALID_ROLES,
    VIEW_DASHBOARD,
    VIEW_DEBTS,
    VIEW_INVENTORY,
    VIEW_POS,
    VIEW_TRANSACTIONS,
)


@dataclass(frozen=True)
class Role:
    role_id: str
    permissions: tuple[str, ...]

    def __post_init__(self):
        if not self.role_id or not isinstance(self.role_id, str):
            raise ValueError("role_id must be a non-empty string.")

        if self.role_id not in VALID_ROLES:
            raise ValueError(
                f"role_id '{self.role_id}' not valid. "
                f"Must be one of: {sorted(VALID_ROLES)}"
            )

        if not isinstance(self.permissions, tuple):
            raise ValueError("permissions must be a tuple.")

        normalized = tuple(sorted(set(self.permissions)))
        if not normalized:
            raise ValueError("permissions must contain at least one value.")

        for permission in normalized:
            if permission not in VALID_PERMISSIONS:
                raise ValueError(
                    f"permission '{permission}' not valid. "
                    f"Must be one of: {sorted(VALID_PERMISSIONS)}"
                )

        object.__setattr__(self, "permissions", normalized)

    def allows(self, permission: str) -> bool:
        return permission in self.permissions


DEFAULT_ROLES: Dict[str, Role] = {
    ROLE_ADMIN: Role(role_id=ROLE_ADMIN, permissions=tuple(VALID_PERMISSIONS)),
    ROLE_KASIR: Role(
        role_id=ROLE_KASIR,
        permissions=(
            PERMISSION_CATALOG_VIEW,
            PERMISSION_POS_SELL,
            PERMISSION_TRANSACTIONS_VIEW,
            PERMISSION_DEBT_VIEW,
            PERMISSION_DEBT_SETTLE,
        ),
    ),
    ROLE_GUDANG: Role(
        role_id=ROLE_GUDANG,
        permissions=(
            PERMISSION_CATALOG_VIEW,
            PERMISSION_INVENTORY_VIEW,
            PERMISSION_INVENTORY_ADJUST,
            PERMISSION_DEBT_VIEW,
        ),
    ),
}

# view -> permission required to open it
VIEW_PERMISSIONS: Dict[str, str] = {
    VIEW_DASHBOARD: PERMISSION_DASHBOARD_VIEW,
    VIEW_POS: PERMISSION_POS_SELL,
    VIEW_INVENTORY: PERMISSION_INVENTORY_VIEW,
    VIEW_TRANSACTIONS: PERMISSION_TRANSACTIONS_VIEW,
    VIEW_DEBTS: PERMISSION_DEBT_VIEW,
}

LANDING_VIEWS: Dict[str, str] = {
    ROLE_ADMIN: VIEW_DASHBOARD,
    ROLE_KASIR: VIEW_POS,
    ROLE_GUDANG: VIEW_INVENTORY,
}
