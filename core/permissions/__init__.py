"""
BangunanPro Permissions - Public API
======================================
"""

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
)
from core.permissions.evaluator import (
    PermissionEvaluationResult,
    PermissionEvaluator,
)
from core.permissions.models import DEFAULT_ROLES, Role

__all__ = [
    "ROLE_ADMIN",
    "ROLE_KASIR",
    "ROLE_GUDANG",
    "VALID_ROLES",
    "PERMISSION_CATALOG_VIEW",
    "PERMISSION_POS_SELL",
    "PERMISSION_TRANSACTIONS_VIEW",
    "PERMISSION_INVENTORY_VIEW",
    "PERMISSION_INVENTORY_ADJUST",
    "PERMISSION_DEBT_VIEW",
    "PERMISSION_DEBT_SETTLE",
    "PERMISSION_DASHBOARD_VIEW",
    "PERMISSION_ADVISOR_ASK",
    "VALID_PERMISSIONS",
    "DEFAULT_ROLES",
    "Role",
    "PermissionEvaluator",
    "PermissionEvaluationResult",
]
