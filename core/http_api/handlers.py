"""
BangunanPro HTTP API - Framework-Agnostic Handlers
====================================================
Pure handler functions over contracts and injected dependencies.

Every handler authenticates the caller, checks the permission the
operation needs, runs the operation against the StoreContext and
returns a response envelope. StoreError never escapes a handler.
"""

from __future__ import annotations

import logging
from typing import Any

from core.commands.rejection import RejectionReason
from core.errors import StoreError
from core.http_api.auth.middleware import resolve_request_context
from core.http_api.contracts import (
    AdvisorAskHttpRequest,
    CartAddHttpRequest,
    CartRemoveHttpRequest,
    CartUpdateHttpRequest,
    CheckoutHttpRequest,
    ProductSearchRequest,
    RestockHttpRequest,
    SettleDebtHttpRequest,
)
from core.http_api.errors import rejection_response, store_error_response, success_response
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
)
from core.primitives.money import format_rupiah
from projections.inventory import inventory_rows

logger = logging.getLogger("bangunan.http")


def _authorize(dependencies, headers, permission: str | None):
    return resolve_request_context(
        headers=headers,
        auth_provider=dependencies.auth_provider,
        permission_evaluator=dependencies.permission_evaluator,
        permission=permission,
    )


def _rejected(actor, permission: str | None) -> dict[str, Any]:
    logger.info("Request rejected code=%s permission=%s", actor.code, permission)
    return rejection_response(actor)


def _serialize_transaction(transaction) -> dict[str, Any]:
    return {
        **transaction.to_dict(),
        "total_display": format_rupiah(transaction.total),
        "outstanding_balance": (
            transaction.outstanding_balance if transaction.is_debt else 0
        ),
        "change_due": transaction.change_due,
    }


def _cart_payload(cart) -> dict[str, Any]:
    snapshot = cart.snapshot()
    snapshot["total_display"] = format_rupiah(snapshot["total"])
    return snapshot


# ══════════════════════════════════════════════════════════════
# SESSION
# ══════════════════════════════════════════════════════════════

def get_session(dependencies, headers: dict[str, Any] | None = None) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, None)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, None)

    evaluator = dependencies.permission_evaluator
    return success_response({
        "actor": actor.to_dict(),
        "store_name": dependencies.store.settings.store_name,
        "landing_view": evaluator.landing_view(actor),
        "views": list(evaluator.allowed_views(actor)),
    })


# ══════════════════════════════════════════════════════════════
# CATALOG / INVENTORY
# ══════════════════════════════════════════════════════════════

def list_products(
    request: ProductSearchRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_CATALOG_VIEW)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_CATALOG_VIEW)

    products = dependencies.store.catalog.list_products(request.query)
    return success_response({
        "items": [product.to_dict() for product in products],
        "count": len(products),
    })


def list_inventory(dependencies, headers: dict[str, Any] | None = None) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_INVENTORY_VIEW)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_INVENTORY_VIEW)

    rows = inventory_rows(dependencies.store.catalog)
    return success_response({"items": rows, "count": len(rows)})


def post_inventory_restock(
    request: RestockHttpRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_INVENTORY_ADJUST)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_INVENTORY_ADJUST)

    catalog = dependencies.store.catalog
    try:
        catalog.restock(request.product_id, request.quantity)
    except StoreError as exc:
        return store_error_response(exc, policy_name="inventory_restock")
    return success_response({"product": catalog.get(request.product_id).to_dict()})


# ══════════════════════════════════════════════════════════════
# CART
# ══════════════════════════════════════════════════════════════

def get_cart(dependencies, headers: dict[str, Any] | None = None) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_POS_SELL)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_POS_SELL)
    return success_response({"cart": _cart_payload(dependencies.store.cart_for(actor))})


def post_cart_add(
    request: CartAddHttpRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_POS_SELL)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_POS_SELL)

    store = dependencies.store
    try:
        product = store.catalog.get(request.product_id)
    except StoreError as exc:
        return store_error_response(exc, policy_name="cart_add")

    cart = store.cart_for(actor)
    result = cart.add_item(product)
    return success_response({"result": result.to_dict(), "cart": _cart_payload(cart)})


def post_cart_update(
    request: CartUpdateHttpRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_POS_SELL)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_POS_SELL)

    cart = dependencies.store.cart_for(actor)
    result = cart.update_quantity(request.product_id, request.delta)
    return success_response({"result": result.to_dict(), "cart": _cart_payload(cart)})


def post_cart_remove(
    request: CartRemoveHttpRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_POS_SELL)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_POS_SELL)

    cart = dependencies.store.cart_for(actor)
    result = cart.remove_item(request.product_id)
    return success_response({"result": result.to_dict(), "cart": _cart_payload(cart)})


def post_cart_clear(dependencies, headers: dict[str, Any] | None = None) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_POS_SELL)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_POS_SELL)

    cart = dependencies.store.cart_for(actor)
    result = cart.clear()
    return success_response({"result": result.to_dict(), "cart": _cart_payload(cart)})


# ══════════════════════════════════════════════════════════════
# CHECKOUT / TRANSACTIONS
# ══════════════════════════════════════════════════════════════

def post_checkout(
    request: CheckoutHttpRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_POS_SELL)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_POS_SELL)

    try:
        transaction = dependencies.store.checkout(
            actor,
            payment_method=request.payment_method,
            amount_paid=request.amount_paid,
            customer_name=request.customer_name,
        )
    except StoreError as exc:
        return store_error_response(exc, policy_name="checkout")
    return success_response({"transaction": _serialize_transaction(transaction)})


def list_transactions(dependencies, headers: dict[str, Any] | None = None) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_TRANSACTIONS_VIEW)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_TRANSACTIONS_VIEW)

    transactions = dependencies.store.ledger.list()
    return success_response({
        "items": [_serialize_transaction(t) for t in transactions],
        "count": len(transactions),
    })


# ══════════════════════════════════════════════════════════════
# DEBTS
# ══════════════════════════════════════════════════════════════

def list_debts(dependencies, headers: dict[str, Any] | None = None) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_DEBT_VIEW)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_DEBT_VIEW)
    return success_response(dependencies.store.debts.snapshot())


def post_debt_settle(
    request: SettleDebtHttpRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_DEBT_SETTLE)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_DEBT_SETTLE)

    store = dependencies.store
    try:
        transaction = store.settle_debt(request.transaction_id)
    except StoreError as exc:
        return store_error_response(exc, policy_name="debt_settle")
    return success_response({
        "transaction": _serialize_transaction(transaction),
        "total_outstanding": store.debts.total_outstanding(),
    })


# ══════════════════════════════════════════════════════════════
# DASHBOARD / ADVISOR
# ══════════════════════════════════════════════════════════════

def get_dashboard(dependencies, headers: dict[str, Any] | None = None) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_DASHBOARD_VIEW)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_DASHBOARD_VIEW)

    store = dependencies.store
    latest = store.advisor.latest_answer
    return success_response({
        **store.metrics.snapshot(),
        "advisor_answer": None if latest is None else latest.to_dict(),
    })


async def post_advisor_ask(
    request: AdvisorAskHttpRequest,
    dependencies,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    actor = _authorize(dependencies, headers, PERMISSION_ADVISOR_ASK)
    if isinstance(actor, RejectionReason):
        return _rejected(actor, PERMISSION_ADVISOR_ASK)

    answer = await dependencies.store.advisor.ask(request.question)
    return success_response({"answer": None if answer is None else answer.to_dict()})
