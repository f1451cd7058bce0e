"""
BangunanPro Permissions - Constants
=====================================
"""

ROLE_ADMIN = "ADMIN"
ROLE_KASIR = "KASIR"
ROLE_GUDANG = "GUDANG"

VALID_ROLES = frozenset({ROLE_ADMIN, ROLE_KASIR, ROLE_GUDANG})

PERMISSION_CATALOG_VIEW = "catalog.view"
PERMISSION_POS_SELL = "pos.sell"
PERMISSION_TRANSACTIONS_VIEW = "transactions.view"
PERMISSION_INVENTORY_VIEW = "inventory.view"
PERMISSION_INVENTORY_ADJUST = "inventory.adjust"
PERMISSION_DEBT_VIEW = "debt.view"
PERMISSION_DEBT_SETTLE = "debt.settle"
PERMISSION_DASHBOARD_VIEW = "dashboard.view"
PERMISSION_ADVISOR_ASK = "advisor.ask"

VALID_PERMISSIONS = frozenset({
    PERMISSION_CATALOG_VIEW,
    PERMISSION_POS_SELL,
    PERMISSION_TRANSACTIONS_VIEW,
    PERMISSION_INVENTORY_VIEW,
    PERMISSION_INVENTORY_ADJUST,
    PERMISSION_DEBT_VIEW,
    PERMISSION_DEBT_SETTLE,
    PERMISSION_DASHBOARD_VIEW,
    PERMISSION_ADVISOR_ASK,
})

VIEW_DASHBOARD = "DASHBOARD"
VIEW_POS = "POS"
VIEW_INVENTORY = "INVENTORY"
VIEW_TRANSACTIONS = "TRANSACTIONS"
VIEW_DEBTS = "DEBTS"
