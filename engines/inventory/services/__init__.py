"""
BangunanPro Inventory Engine - Catalog Store
==============================================
Owns the product list and stock quantities.

Stock mutation is the only externally observable effect of this store.
Stock never goes negative: every decrement is checked before it is applied.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Dict, Iterable, Optional, Tuple

from core.errors import InsufficientStock, NotFound
from core.primitives.money import require_amount, require_count
from engines.inventory.models import Product

logger = logging.getLogger("bangunan.inventory")


class CatalogStore:
    """In-memory catalog keyed by product id, insertion ordered."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: "OrderedDict[str, Product]" = OrderedDict()
        for product in products:
            self.register(product)

    # ── reads ─────────────────────────────────────────────────

    def list_products(self, search: Optional[str] = None) -> Tuple[Product, ...]:
        """All products in insertion order, optionally filtered by name."""
        products = tuple(self._products.values())
        if not search:
            return products
        needle = search.strip().lower()
        return tuple(p for p in products if needle in p.name.lower())

    def get(self, product_id: str) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise NotFound("Product", product_id)
        return product

    def find(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def stock_of(self, product_id: str) -> int:
        """Current stock; unknown ids count as zero."""
        product = self._products.get(product_id)
        return 0 if product is None else product.stock

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __len__(self) -> int:
        return len(self._products)

    # ── writes ────────────────────────────────────────────────

    def register(self, product: Product) -> Product:
        if not isinstance(product, Product):
            raise ValueError("product must be Product.")
        if product.product_id in self._products:
            raise ValueError(f"Product '{product.product_id}' already registered.")
        self._products[product.product_id] = product
        return product

    def adjust_stock(self, product_id: str, delta: int) -> int:
        """
        Apply a signed stock delta and return the new stock.

        Raises NotFound for unknown ids and InsufficientStock when the
        result would be negative. Nothing changes on failure.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValueError(f"delta must be int, got {type(delta).__name__}.")
        product = self.get(product_id)
        new_stock = product.stock + delta
        if new_stock < 0:
            raise InsufficientStock(product_id, requested=-delta, available=product.stock)
        self._products[product_id] = product.with_stock(new_stock)
        logger.debug(
            "Stock adjusted product=%s delta=%d stock=%d", product_id, delta, new_stock
        )
        return new_stock

    def restock(self, product_id: str, quantity: int) -> int:
        """Receive goods into stock."""
        require_count(quantity, "quantity", minimum=1)
        new_stock = self.adjust_stock(product_id, quantity)
        logger.info(
            "Restocked product=%s quantity=%d stock=%d", product_id, quantity, new_stock
        )
        return new_stock

    def update_pricing(
        self,
        product_id: str,
        *,
        price: Optional[int] = None,
        cost: Optional[int] = None,
    ) -> Product:
        """Admin price edit. Committed transactions keep their frozen prices."""
        product = self.get(product_id)
        changes = {}
        if price is not None:
            changes["price"] = require_amount(price, "price")
        if cost is not None:
            changes["cost"] = require_amount(cost, "cost")
        updated = Product.from_dict({**product.to_dict(), **changes})
        self._products[product_id] = updated
        return updated

    # ── pre-flight ────────────────────────────────────────────

    def check_availability(self, requests: Iterable[Tuple[str, int]]) -> None:
        """
        Verify that every (product_id, quantity) request can be decremented.

        Quantities for the same product are summed. Raises the first
        NotFound or InsufficientStock; never mutates.
        """
        totals: Dict[str, int] = {}
        for product_id, quantity in requests:
            totals[product_id] = totals.get(product_id, 0) + quantity

        for product_id, quantity in totals.items():
            product = self.get(product_id)
            if quantity > product.stock:
                raise InsufficientStock(
                    product_id, requested=quantity, available=product.stock
                )
