"""
BangunanPro Projections - Debt Register
=========================================
Read model over the transaction ledger: TEMPO sales that are still
PENDING. Computed on every call; the ledger is the only source of truth.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, Tuple

from core.errors import NotFound
from engines.retail.models import Transaction


class LedgerReadProtocol(Protocol):
    def list(self) -> Tuple[Transaction, ...]:
        ...


class DebtRegister:
    """Outstanding customer debt (piutang)."""

    projection_name = "debt_register"

    def __init__(self, ledger: LedgerReadProtocol):
        self._ledger = ledger

    def pending_debts(self) -> Tuple[Transaction, ...]:
        """TEMPO + PENDING transactions, newest first."""
        return tuple(t for t in self._ledger.list() if t.is_debt)

    @staticmethod
    def outstanding_balance(transaction: Transaction) -> int:
        return max(0, transaction.total - transaction.amount_paid)

    def total_outstanding(self) -> int:
        return sum(self.outstanding_balance(t) for t in self.pending_debts())

    def get_pending(self, transaction_id: str) -> Transaction:
        for transaction in self.pending_debts():
            if transaction.transaction_id == transaction_id:
                return transaction
        raise NotFound("Debt", transaction_id)

    def snapshot(self) -> Dict[str, Any]:
        debts = self.pending_debts()
        return {
            "debts": [
                {
                    "transaction_id": t.transaction_id,
                    "created_at": t.created_at.isoformat(),
                    "customer_name": t.customer_name,
                    "cashier_name": t.cashier_name,
                    "total": t.total,
                    "amount_paid": t.amount_paid,
                    "outstanding": self.outstanding_balance(t),
                }
                for t in debts
            ],
            "debt_count": len(debts),
            "total_outstanding": sum(self.outstanding_balance(t) for t in debts),
        }
