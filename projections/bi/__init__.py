"""
BangunanPro BI Projections - Metrics Aggregator
=================================================
Dashboard metrics derived from the catalog and the transaction ledger.

Every call is a full scan; nothing is cached or updated incrementally.
Revenue is recognized at sale: PENDING (unpaid TEMPO) transactions count.

Usage:
    metrics = MetricsAggregator(catalog=catalog, ledger=ledger)
    metrics.total_revenue()
    metrics.top_sellers(3)
    metrics.summary_context()
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, Tuple

from core.primitives.money import format_rupiah
from engines.inventory.models import Product
from engines.retail.models import Transaction


class CatalogReadProtocol(Protocol):
    def list_products(self, search=None) -> Tuple[Product, ...]:
        ...


class LedgerReadProtocol(Protocol):
    def list(self) -> Tuple[Transaction, ...]:
        ...

    def recent(self, limit: int) -> Tuple[Transaction, ...]:
        ...


class MetricsAggregator:
    projection_name = "metrics_aggregator"

    def __init__(
        self,
        *,
        catalog: CatalogReadProtocol,
        ledger: LedgerReadProtocol,
        top_seller_count: int = 3,
        recent_sales_limit: int = 5,
    ):
        self._catalog = catalog
        self._ledger = ledger
        self._top_seller_count = top_seller_count
        self._recent_sales_limit = recent_sales_limit

    # ── stock ─────────────────────────────────────────────────

    def low_stock(self) -> Tuple[Product, ...]:
        return tuple(p for p in self._catalog.list_products() if p.is_low_stock)

    # ── sales ─────────────────────────────────────────────────

    def total_revenue(self) -> int:
        return sum(t.total for t in self._ledger.list())

    def total_profit(self) -> int:
        """May be negative when items sell below cost."""
        return sum(t.profit for t in self._ledger.list())

    def transaction_count(self) -> int:
        return len(self._ledger.list())

    def outstanding_debt(self) -> int:
        return sum(
            max(0, t.total - t.amount_paid)
            for t in self._ledger.list()
            if t.is_debt
        )

    def top_sellers(self, n: int) -> List[Tuple[str, int]]:
        """
        (product name, summed quantity) pairs, highest first.

        Grouped by name, not id. Ties keep first-encountered order; the
        ledger is scanned in its stored (newest first) order.
        """
        if n <= 0:
            return []
        quantities: Dict[str, int] = {}
        for transaction in self._ledger.list():
            for item in transaction.items:
                quantities[item.name] = quantities.get(item.name, 0) + item.quantity
        ranked = sorted(quantities.items(), key=lambda entry: entry[1], reverse=True)
        return ranked[:n]

    def recent_sales(self, limit: int | None = None) -> Tuple[Transaction, ...]:
        """Sales chart feed: the latest transactions, oldest first."""
        return self._ledger.recent(
            self._recent_sales_limit if limit is None else limit
        )

    # ── digests ───────────────────────────────────────────────

    def summary_context(self) -> str:
        """Compact digest handed to the business advisor."""
        low_stock = self.low_stock()
        low_stock_text = (
            ", ".join(f"{p.name} ({p.stock} {p.unit})" for p in low_stock)
            if low_stock
            else "None"
        )
        top_text = ", ".join(
            name for name, _ in self.top_sellers(self._top_seller_count)
        )
        lines = [
            "Current Data Snapshot:",
            f"- Total Revenue: {format_rupiah(self.total_revenue())}",
            f"- Outstanding Customer Debt (Piutang): {format_rupiah(self.outstanding_debt())}",
            f"- Low Stock Alerts: {low_stock_text}",
            f"- Top Selling Products: {top_text}",
            f"- Total Transactions recorded: {self.transaction_count()}",
        ]
        return "\n".join(lines)

    def snapshot(self) -> Dict[str, Any]:
        revenue = self.total_revenue()
        profit = self.total_profit()
        outstanding = self.outstanding_debt()
        low_stock = self.low_stock()
        return {
            "cards": {
                "total_revenue": revenue,
                "total_revenue_display": format_rupiah(revenue),
                "total_profit": profit,
                "total_profit_display": format_rupiah(profit),
                "low_stock_count": len(low_stock),
                "outstanding_debt": outstanding,
                "outstanding_debt_display": format_rupiah(outstanding),
            },
            "sales_chart": [
                {"transaction_id": t.transaction_id, "total": t.total}
                for t in self.recent_sales()
            ],
            "low_stock": [p.to_dict() for p in low_stock],
            "top_sellers": [
                {"name": name, "quantity": quantity}
                for name, quantity in self.top_sellers(self._top_seller_count)
            ],
            "transaction_count": self.transaction_count(),
        }
