"""
BangunanPro Django Adapter Views
==================================
Pass-through HTTP views over core/http_api handlers.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
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
from core.http_api.errors import (
    INVALID_REQUEST,
    METHOD_NOT_ALLOWED,
    error_response,
    http_status_for,
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


def _headers_from_request(request: HttpRequest) -> dict[str, str]:
    return {str(key): str(value) for key, value in request.headers.items()}


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_response(code=code, message=message, details={}),
        status=status,
    )


def _json_payload(payload: dict[str, Any]) -> JsonResponse:
    return JsonResponse(payload, status=http_status_for(payload))


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        METHOD_NOT_ALLOWED,
        "Method not allowed for this endpoint.",
        status=405,
    )


def _dispatch_bodyless(handler, request: HttpRequest) -> JsonResponse:
    payload = handler(
        build_dependencies(),
        headers=_headers_from_request(request),
    )
    return _json_payload(payload)


def _build_contract(request_contract_factory, request: HttpRequest):
    body = _parse_json_body(request)
    try:
        return request_contract_factory(body)
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]} is required.") from exc


def _dispatch_write(write_handler, request_contract_factory, request: HttpRequest):
    headers = _headers_from_request(request)
    try:
        contract = _build_contract(request_contract_factory, request)
    except ValueError as exc:
        return _json_error(INVALID_REQUEST, str(exc), status=400)

    payload = write_handler(
        contract,
        build_dependencies(),
        headers=headers,
    )
    return _json_payload(payload)


def _restock_contract_factory(body):
    return RestockHttpRequest(
        product_id=body["product_id"],
        quantity=body["quantity"],
    )


def _cart_add_contract_factory(body):
    return CartAddHttpRequest(product_id=body["product_id"])


def _cart_update_contract_factory(body):
    return CartUpdateHttpRequest(
        product_id=body["product_id"],
        delta=body["delta"],
    )


def _cart_remove_contract_factory(body):
    return CartRemoveHttpRequest(product_id=body["product_id"])


def _checkout_contract_factory(body):
    return CheckoutHttpRequest(
        payment_method=str(body["payment_method"]).upper(),
        amount_paid=body.get("amount_paid", 0),
        customer_name=body.get("customer_name"),
    )


def _settle_contract_factory(body):
    return SettleDebtHttpRequest(transaction_id=body["transaction_id"])


def _advisor_contract_factory(body):
    return AdvisorAskHttpRequest(question=body.get("question", ""))


# ══════════════════════════════════════════════════════════════
# READ VIEWS
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def session_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _dispatch_bodyless(get_session, request)


@csrf_exempt
def products_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    contract = ProductSearchRequest(query=request.GET.get("q") or None)
    payload = list_products(
        contract,
        build_dependencies(),
        headers=_headers_from_request(request),
    )
    return _json_payload(payload)


@csrf_exempt
def inventory_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _dispatch_bodyless(list_inventory, request)


@csrf_exempt
def cart_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _dispatch_bodyless(get_cart, request)


@csrf_exempt
def transactions_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _dispatch_bodyless(list_transactions, request)


@csrf_exempt
def debts_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _dispatch_bodyless(list_debts, request)


@csrf_exempt
def dashboard_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _dispatch_bodyless(get_dashboard, request)


# ══════════════════════════════════════════════════════════════
# WRITE VIEWS
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def inventory_restock_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(post_inventory_restock, _restock_contract_factory, request)


@csrf_exempt
def cart_add_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(post_cart_add, _cart_add_contract_factory, request)


@csrf_exempt
def cart_update_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(post_cart_update, _cart_update_contract_factory, request)


@csrf_exempt
def cart_remove_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(post_cart_remove, _cart_remove_contract_factory, request)


@csrf_exempt
def cart_clear_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_bodyless(post_cart_clear, request)


@csrf_exempt
def checkout_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(post_checkout, _checkout_contract_factory, request)


@csrf_exempt
def debts_settle_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(post_debt_settle, _settle_contract_factory, request)


@csrf_exempt
async def advisor_ask_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    headers = _headers_from_request(request)
    try:
        contract = _build_contract(_advisor_contract_factory, request)
    except ValueError as exc:
        return _json_error(INVALID_REQUEST, str(exc), status=400)

    payload = await post_advisor_ask(
        contract,
        build_dependencies(),
        headers=headers,
    )
    return _json_payload(payload)
