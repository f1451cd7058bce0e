"""
BangunanPro Retail Engine - Transaction Ledger
================================================
Checkout lifecycle: cart entries -> committed transaction -> settlement.

Commit is validate-then-apply: stock sufficiency for every line is checked
before any decrement. If an apply step still fails, decrements already
applied are reversed before the error propagates, so a failed checkout
never leaves partial stock mutation behind.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from core.errors import AlreadySettled, CustomerNameRequired, EmptyCart, NotFound, StoreError
from core.primitives.money import require_amount
from core.time.clock import Clock
from engines.cart.models import CartItem
from engines.retail.models import (
    LineItem,
    PaymentMethod,
    Transaction,
    TransactionStatus,
    derive_status,
)

logger = logging.getLogger("bangunan.retail")


# ══════════════════════════════════════════════════════════════
# PROTOCOLS
# ══════════════════════════════════════════════════════════════

class StockProtocol(Protocol):
    def check_availability(self, requests: Iterable[Tuple[str, int]]) -> None:
        ...

    def adjust_stock(self, product_id: str, delta: int) -> int:
        ...


class TransactionIdProvider(Protocol):
    def new_transaction_id(self) -> str:
        ...


class SequentialTransactionIds:
    """Monotonic ids: TRX-000001, TRX-000002, ..."""

    def __init__(self, prefix: str = "TRX", start: int = 1):
        self._prefix = prefix
        self._next = start

    def new_transaction_id(self) -> str:
        value = f"{self._prefix}-{self._next:06d}"
        self._next += 1
        return value


def coerce_payment_method(value: Union[PaymentMethod, str]) -> PaymentMethod:
    if isinstance(value, PaymentMethod):
        return value
    try:
        return PaymentMethod(str(value).upper())
    except ValueError as exc:
        raise ValueError(
            f"payment_method '{value}' not valid. "
            f"Must be one of: {sorted(m.value for m in PaymentMethod)}"
        ) from exc


# ══════════════════════════════════════════════════════════════
# LEDGER
# ══════════════════════════════════════════════════════════════

class TransactionLedger:
    """Append-only transaction list; settlement is the only mutation path."""

    def __init__(
        self,
        *,
        catalog: StockProtocol,
        clock: Clock,
        id_provider: Optional[TransactionIdProvider] = None,
        generic_customer_name: str = "Umum",
        require_tempo_customer_name: bool = False,
    ):
        self._catalog = catalog
        self._clock = clock
        self._id_provider = id_provider or SequentialTransactionIds()
        self._generic_customer_name = generic_customer_name
        self._require_tempo_customer_name = require_tempo_customer_name
        # newest first
        self._transactions: List[Transaction] = []

    # ── commit ────────────────────────────────────────────────

    def commit(
        self,
        entries: Sequence[CartItem],
        *,
        payment_method: Union[PaymentMethod, str],
        cashier_name: str,
        amount_paid: int = 0,
        customer_name: Optional[str] = None,
    ) -> Transaction:
        if not entries:
            raise EmptyCart()

        method = coerce_payment_method(payment_method)
        require_amount(amount_paid, "amount_paid")
        if not cashier_name:
            raise ValueError("cashier_name must be non-empty.")

        items = tuple(
            LineItem(
                product_id=entry.product_id,
                name=entry.name,
                price=entry.price,
                cost=entry.cost,
                quantity=entry.quantity,
            )
            for entry in entries
        )
        total = sum(item.line_total for item in items)
        status = derive_status(method, amount_paid, total)

        if method == PaymentMethod.TEMPO:
            resolved_customer = (customer_name or "").strip()
            if not resolved_customer and self._require_tempo_customer_name:
                raise CustomerNameRequired()
        else:
            resolved_customer = self._generic_customer_name

        self._catalog.check_availability(
            (item.product_id, item.quantity) for item in items
        )
        self._apply_decrements(items)

        transaction = Transaction(
            transaction_id=self._new_transaction_id(),
            created_at=self._clock.now_utc(),
            items=items,
            total=total,
            payment_method=method,
            customer_name=resolved_customer,
            cashier_name=cashier_name,
            status=status,
            amount_paid=amount_paid,
        )
        self._transactions.insert(0, transaction)

        logger.info(
            "Transaction %s committed method=%s total=%d status=%s cashier=%s",
            transaction.transaction_id, method.value, total,
            status.value, cashier_name,
        )
        return transaction

    def _apply_decrements(self, items: Tuple[LineItem, ...]) -> None:
        applied: List[LineItem] = []
        try:
            for item in items:
                self._catalog.adjust_stock(item.product_id, -item.quantity)
                applied.append(item)
        except StoreError:
            for item in reversed(applied):
                self._catalog.adjust_stock(item.product_id, item.quantity)
            logger.warning(
                "Checkout rolled back after %d of %d stock decrements",
                len(applied), len(items),
            )
            raise

    def _new_transaction_id(self) -> str:
        existing = {t.transaction_id for t in self._transactions}
        candidate = self._id_provider.new_transaction_id()
        while candidate in existing:
            candidate = self._id_provider.new_transaction_id()
        return candidate

    # ── settlement ────────────────────────────────────────────

    def settle(self, transaction_id: str) -> Transaction:
        """Mark a pending transaction as fully paid."""
        index = self._index_of(transaction_id)
        current = self._transactions[index]
        if current.status == TransactionStatus.PAID:
            raise AlreadySettled(transaction_id)

        settled = current.settled(self._clock.now_utc())
        self._transactions[index] = settled
        logger.info(
            "Transaction %s settled amount=%d customer=%s",
            transaction_id, current.outstanding_balance, current.customer_name,
        )
        return settled

    # ── history ───────────────────────────────────────────────

    def record(self, transaction: Transaction) -> Transaction:
        """Insert a pre-built transaction (seed or restore); no stock effect."""
        if not isinstance(transaction, Transaction):
            raise ValueError("transaction must be Transaction.")
        if any(t.transaction_id == transaction.transaction_id for t in self._transactions):
            raise ValueError(
                f"Transaction '{transaction.transaction_id}' already recorded."
            )
        self._transactions.append(transaction)
        self._transactions.sort(key=lambda t: t.created_at, reverse=True)
        return transaction

    def list(self) -> Tuple[Transaction, ...]:
        """All transactions, newest first."""
        return tuple(self._transactions)

    def get(self, transaction_id: str) -> Transaction:
        return self._transactions[self._index_of(transaction_id)]

    def recent(self, limit: int) -> Tuple[Transaction, ...]:
        """The latest `limit` transactions, oldest first."""
        return tuple(reversed(self._transactions[:limit]))

    def __len__(self) -> int:
        return len(self._transactions)

    def _index_of(self, transaction_id: str) -> int:
        for index, transaction in enumerate(self._transactions):
            if transaction.transaction_id == transaction_id:
                return index
        raise NotFound("Transaction", transaction_id)


# ══════════════════════════════════════════════════════════════
# CHECKOUT ORCHESTRATION
# ══════════════════════════════════════════════════════════════

class CheckoutService:
    """Commits a cart to the ledger; the cart is cleared only on success."""

    def __init__(self, ledger: TransactionLedger):
        self._ledger = ledger

    def checkout(
        self,
        cart,
        *,
        payment_method: Union[PaymentMethod, str],
        cashier_name: str,
        amount_paid: int = 0,
        customer_name: Optional[str] = None,
    ) -> Transaction:
        if cart.is_empty:
            raise EmptyCart()

        transaction = self._ledger.commit(
            cart.entries(),
            payment_method=payment_method,
            cashier_name=cashier_name,
            amount_paid=amount_paid,
            customer_name=customer_name,
        )
        cart.clear()
        return transaction
