"""
BangunanPro HTTP API - Error Mapping
======================================
Stable transport error mapping for rejections and store errors.
"""

from __future__ import annotations

from typing import Any, Optional

from core.commands.rejection import ReasonCode, RejectionReason
from core.errors import StoreError
from core.http_api.contracts import HttpApiErrorBody, HttpApiResponse

INVALID_REQUEST = ReasonCode.INVALID_REQUEST
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

HTTP_STATUS_BY_CODE: dict[str, int] = {
    ReasonCode.INVALID_REQUEST: 400,
    ReasonCode.EMPTY_CART: 400,
    ReasonCode.INSUFFICIENT_STOCK: 400,
    ReasonCode.ALREADY_SETTLED: 400,
    ReasonCode.CUSTOMER_NAME_REQUIRED: 400,
    ReasonCode.AUTH_REQUIRED: 401,
    ReasonCode.PERMISSION_DENIED: 403,
    ReasonCode.NOT_FOUND: 404,
    METHOD_NOT_ALLOWED: 405,
    ReasonCode.CONFIGURATION_MISSING: 503,
    ReasonCode.UPSTREAM_FAILURE: 502,
}


def http_status_for(payload: dict[str, Any]) -> int:
    if payload.get("ok"):
        return 200
    code = (payload.get("error") or {}).get("code")
    return HTTP_STATUS_BY_CODE.get(code, 400)


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        ok=False,
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(
    data: Any,
    *,
    meta: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(ok=True, data=data, meta=meta).to_dict()


def map_rejection_reason(reason: RejectionReason) -> HttpApiErrorBody:
    return HttpApiErrorBody(
        code=reason.code,
        message=reason.message,
        details={
            "policy_name": reason.policy_name,
            **dict(reason.details or {}),
        },
    )


def rejection_response(
    reason: RejectionReason,
    *,
    extra_details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    mapped = map_rejection_reason(reason)
    details = dict(mapped.details)
    if extra_details:
        details.update(extra_details)
    return error_response(
        code=mapped.code,
        message=mapped.message,
        details=details,
    )


def store_error_response(exc: StoreError, *, policy_name: str) -> dict[str, Any]:
    return rejection_response(exc.to_rejection(policy_name))
