"""
BangunanPro Context - StoreContext
====================================
Explicit owner of all per-store state: settings, clock, catalog, ledger,
per-actor carts, read models and the business advisor.

There are no module-level singletons. The Django adapter builds one
StoreContext per process; tests build as many as they need.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Union

from ai.advisors.base import AdvisoryClient
from ai.advisors.business_advisor import BusinessAdvisor
from ai.advisors.gemini_client import GeminiClient
from core.config.store_settings import StoreSettings
from core.context.actor_context import ActorContext
from core.time.clock import Clock, SystemClock
from engines.cart.services import CartEngine
from engines.inventory.models import Product
from engines.inventory.services import CatalogStore
from engines.retail.models import PaymentMethod, Transaction
from engines.retail.services import (
    CheckoutService,
    TransactionIdProvider,
    TransactionLedger,
)
from projections.bi import MetricsAggregator
from projections.debt import DebtRegister


class StoreContext:
    def __init__(
        self,
        *,
        settings: Optional[StoreSettings] = None,
        clock: Optional[Clock] = None,
        products: Iterable[Product] = (),
        id_provider: Optional[TransactionIdProvider] = None,
        advisory_client: Optional[AdvisoryClient] = None,
    ):
        self.settings = settings or StoreSettings()
        self.clock = clock or SystemClock()
        self.catalog = CatalogStore(products)
        self.ledger = TransactionLedger(
            catalog=self.catalog,
            clock=self.clock,
            id_provider=id_provider,
            generic_customer_name=self.settings.generic_customer_name,
            require_tempo_customer_name=self.settings.require_tempo_customer_name,
        )
        self.checkout_service = CheckoutService(self.ledger)
        self.debts = DebtRegister(self.ledger)
        self.metrics = MetricsAggregator(
            catalog=self.catalog,
            ledger=self.ledger,
            top_seller_count=self.settings.top_seller_count,
            recent_sales_limit=self.settings.recent_sales_limit,
        )
        self.advisor = BusinessAdvisor(
            metrics=self.metrics,
            client=advisory_client or GeminiClient.from_settings(self.settings),
            store_description=self.settings.store_description,
        )
        self._carts: Dict[str, CartEngine] = {}

    # ── carts ─────────────────────────────────────────────────

    def cart_for(self, actor: ActorContext) -> CartEngine:
        """One cart per actor id, created on first use."""
        cart = self._carts.get(actor.actor_id)
        if cart is None:
            cart = CartEngine(self.catalog)
            self._carts[actor.actor_id] = cart
        return cart

    # ── operations ────────────────────────────────────────────

    def checkout(
        self,
        actor: ActorContext,
        *,
        payment_method: Union[PaymentMethod, str],
        amount_paid: int = 0,
        customer_name: Optional[str] = None,
    ) -> Transaction:
        """Commit the actor's cart; the actor's name goes on the receipt."""
        return self.checkout_service.checkout(
            self.cart_for(actor),
            payment_method=payment_method,
            cashier_name=actor.actor_name,
            amount_paid=amount_paid,
            customer_name=customer_name,
        )

    def settle_debt(self, transaction_id: str) -> Transaction:
        return self.ledger.settle(transaction_id)
