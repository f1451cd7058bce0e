"""
BangunanPro HTTP API - Public API
===================================
"""

from core.http_api.contracts import (
    AdvisorAskHttpRequest,
    CartAddHttpRequest,
    CartRemoveHttpRequest,
    CartUpdateHttpRequest,
    CheckoutHttpRequest,
    HttpApiErrorBody,
    HttpApiResponse,
    ProductSearchRequest,
    RestockHttpRequest,
    SettleDebtHttpRequest,
)
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import (
    error_response,
    http_status_for,
    map_rejection_reason,
    rejection_response,
    store_error_response,
    success_response,
)
from core.http_api.handlers import (
    get_cart,
    get_dashboard,
    get_session,
    list_debts,
    list_inventory,
    list_products,
    list_transactions,
    post_advisor_ask,
    post_cart_add,
    post_cart_clear,
    post_cart_remove,
    post_cart_update,
    post_checkout,
    post_debt_settle,
    post_inventory_restock,
)

__all__ = [
    "AdvisorAskHttpRequest",
    "CartAddHttpRequest",
    "CartRemoveHttpRequest",
    "CartUpdateHttpRequest",
    "CheckoutHttpRequest",
    "HttpApiErrorBody",
    "HttpApiResponse",
    "ProductSearchRequest",
    "RestockHttpRequest",
    "SettleDebtHttpRequest",
    "HttpApiDependencies",
    "error_response",
    "http_status_for",
    "map_rejection_reason",
    "rejection_response",
    "store_error_response",
    "success_response",
    "get_cart",
    "get_dashboard",
    "get_session",
    "list_debts",
    "list_inventory",
    "list_products",
    "list_transactions",
    "post_advisor_ask",
    "post_cart_add",
    "post_cart_clear",
    "post_cart_remove",
    "post_cart_update",
    "post_checkout",
    "post_debt_settle",
    "post_inventory_restock",
]
