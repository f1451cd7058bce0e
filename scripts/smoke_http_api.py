"""
Manual smoke runner for BangunanPro Django adapter endpoints.

Usage:
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000
"""

from __future__ import annotations

import argparse
import json
from urllib import error, request


DEV_ADMIN_API_KEY = "dev-admin-key"
DEV_KASIR_API_KEY = "dev-kasir-key"
DEV_GUDANG_API_KEY = "dev-gudang-key"


def _call(
    *,
    method: str,
    url: str,
    headers: dict[str, str],
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    req_headers = dict(headers)
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=req_headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            status = response.status
            payload = json.loads(response.read().decode("utf-8"))
            return status, payload
    except error.HTTPError as exc:
        payload = json.loads(exc.read().decode("utf-8"))
        return exc.code, payload


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True))


def run(base_url: str) -> None:
    api = base_url.rstrip("/") + "/v1"
    admin = {"X-API-KEY": DEV_ADMIN_API_KEY}
    kasir = {"X-API-KEY": DEV_KASIR_API_KEY}
    gudang = {"X-API-KEY": DEV_GUDANG_API_KEY}

    status, payload = _call(method="GET", url=f"{api}/session", headers={})
    _print_case("missing-key", status, payload)

    status, payload = _call(
        method="GET",
        url=f"{api}/session",
        headers={"X-API-KEY": "invalid-key"},
    )
    _print_case("invalid-key", status, payload)

    status, payload = _call(method="GET", url=f"{api}/dashboard", headers=kasir)
    _print_case("kasir-dashboard-denied", status, payload)

    status, payload = _call(method="GET", url=f"{api}/inventory", headers=gudang)
    _print_case("gudang-inventory", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/cart/add",
        headers=kasir,
        body={"product_id": "1"},
    )
    _print_case("cart-add", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/cart/update",
        headers=kasir,
        body={"product_id": "1", "delta": 1},
    )
    _print_case("cart-update", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/checkout",
        headers=kasir,
        body={"payment_method": "CASH", "amount_paid": 150000},
    )
    _print_case("checkout-cash", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/checkout",
        headers=kasir,
        body={"payment_method": "CASH"},
    )
    _print_case("checkout-empty-cart", status, payload)

    status, payload = _call(method="GET", url=f"{api}/debts", headers=kasir)
    _print_case("debts", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/debts/settle",
        headers=kasir,
        body={"transaction_id": "TRX-002"},
    )
    _print_case("settle-debt", status, payload)

    status, payload = _call(method="GET", url=f"{api}/dashboard", headers=admin)
    _print_case("dashboard", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/advisor/ask",
        headers=admin,
        body={"question": "Produk apa yang perlu segera dipesan ulang?"},
    )
    _print_case("advisor-ask", status, payload)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Server base URL.",
    )
    args = parser.parse_args()
    run(args.base_url)


if __name__ == "__main__":
    main()
