"""
Tests - Checkout Scenarios
===========================
End-to-end flows through StoreContext: cart -> checkout -> debt -> metrics.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.context import ActorContext, StoreContext
from core.errors import EmptyCart, InsufficientStock
from core.permissions import ROLE_KASIR
from core.time.clock import FixedClock
from engines.cart.models import CartChange
from engines.inventory.models import Product
from engines.retail.models import TransactionStatus


NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
KASIR = ActorContext(actor_id="2", actor_name="Siti (Kasir)", role=ROLE_KASIR)


class NoopClient:
    async def generate(self, prompt: str) -> str:
        return ""


def _store(*products):
    return StoreContext(
        clock=FixedClock(NOW),
        products=products,
        advisory_client=NoopClient(),
    )


def test_scenario_a_cash_checkout():
    store = _store(Product("1", "Semen", "Material", "Sak", 65000, 58000, 150, 20))
    cart = store.cart_for(KASIR)
    cart.add_item(store.catalog.get("1"))
    cart.update_quantity("1", 1)

    tx = store.checkout(KASIR, payment_method="CASH")

    assert tx.total == 130000
    assert tx.status == TransactionStatus.PAID
    assert tx.cashier_name == "Siti (Kasir)"
    assert store.catalog.get("1").stock == 148
    assert cart.is_empty


def test_scenario_b_tempo_partial_payment():
    store = _store(Product("5", "Bata Merah", "Material", "Pcs", 800, 600, 5000, 1000))
    cart = store.cart_for(KASIR)
    cart.add_item(store.catalog.get("5"))
    cart.update_quantity("5", 499)

    tx = store.checkout(
        KASIR, payment_method="TEMPO", amount_paid=100000, customer_name="Pak Ahmad"
    )

    assert tx.total == 400000
    assert tx.status == TransactionStatus.PENDING
    assert store.debts.outstanding_balance(tx) == 300000
    assert store.catalog.get("5").stock == 4500


def test_scenario_c_settle_reduces_outstanding():
    store = _store(Product("5", "Bata Merah", "Material", "Pcs", 800, 600, 5000, 1000))
    cart = store.cart_for(KASIR)
    cart.add_item(store.catalog.get("5"))
    cart.update_quantity("5", 499)
    tx = store.checkout(
        KASIR, payment_method="TEMPO", amount_paid=100000, customer_name="Pak Ahmad"
    )
    before = store.debts.total_outstanding()

    settled = store.settle_debt(tx.transaction_id)

    assert settled.amount_paid == 400000
    assert settled.status == TransactionStatus.PAID
    assert before - store.debts.total_outstanding() == 300000
    assert store.debts.pending_debts() == ()


def test_scenario_d_out_of_stock_add_is_noop():
    store = _store(Product("9", "Pasir", "Material", "Truk", 1500000, 1200000, 0, 1))
    cart = store.cart_for(KASIR)

    result = cart.add_item(store.catalog.get("9"))

    assert result.change == CartChange.NO_OP_OUT_OF_STOCK
    assert cart.is_empty


def test_scenario_e_empty_cart_checkout():
    store = _store(Product("1", "Semen", "Material", "Sak", 65000, 58000, 150, 20))

    with pytest.raises(EmptyCart):
        store.checkout(KASIR, payment_method="CASH")

    assert len(store.ledger) == 0
    assert store.catalog.get("1").stock == 150


def test_scenario_f_top_sellers_sum_by_name():
    store = _store(
        Product("3", "Paku 5cm", "Perkakas", "Kg", 25000, 20000, 50, 10),
        Product("4", "Paku 5cm", "Perkakas", "Kg", 26000, 20000, 50, 10),
        Product("1", "Semen", "Material", "Sak", 65000, 58000, 150, 20),
    )
    cart = store.cart_for(KASIR)
    cart.add_item(store.catalog.get("3"))
    cart.update_quantity("3", 4)
    cart.add_item(store.catalog.get("1"))
    store.checkout(KASIR, payment_method="CASH")

    cart.add_item(store.catalog.get("4"))
    cart.update_quantity("4", 2)
    store.checkout(KASIR, payment_method="CASH")

    assert store.metrics.top_sellers(1) == [("Paku 5cm", 8)]


def test_carts_are_isolated_per_actor():
    store = _store(Product("1", "Semen", "Material", "Sak", 65000, 58000, 150, 20))
    other = ActorContext(actor_id="1", actor_name="Budi (Admin)", role="ADMIN")
    store.cart_for(KASIR).add_item(store.catalog.get("1"))

    assert store.cart_for(other).is_empty
    assert store.cart_for(KASIR) is store.cart_for(KASIR)


def test_stock_never_negative_across_checkouts():
    store = _store(Product("3", "Paku 5cm", "Perkakas", "Kg", 25000, 20000, 2, 1))
    first = _actor("10")
    second = _actor("11")
    store.cart_for(first).add_item(store.catalog.get("3"))
    store.cart_for(first).update_quantity("3", 1)
    store.cart_for(second).add_item(store.catalog.get("3"))
    store.cart_for(second).update_quantity("3", 1)

    store.checkout(first, payment_method="CASH")
    with pytest.raises(InsufficientStock):
        store.checkout(second, payment_method="CASH")

    assert store.catalog.get("3").stock == 0
    assert store.cart_for(second).get("3").quantity == 2


def _actor(actor_id):
    return ActorContext(actor_id=actor_id, actor_name=f"Kasir {actor_id}", role=ROLE_KASIR)
