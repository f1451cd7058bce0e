"""
BangunanPro Cart Engine - Application Service
===============================================
Builds a pending sale from catalog products.

Stock ceilings are enforced as silent no-ops:
- adding an out-of-stock product does nothing
- adding a product already in the cart always increments by one
- a quantity change that would exceed current catalog stock does nothing
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Dict, Protocol, Tuple

from engines.cart.models import CartChange, CartItem, CartMutationResult
from engines.inventory.models import Product

logger = logging.getLogger("bangunan.cart")


class StockLookupProtocol(Protocol):
    def stock_of(self, product_id: str) -> int:
        ...


class CartEngine:
    """Ephemeral cart; cleared after checkout or explicit cancel."""

    def __init__(self, stock_lookup: StockLookupProtocol):
        self._stock_lookup = stock_lookup
        self._items: "OrderedDict[str, CartItem]" = OrderedDict()

    def add_item(self, product: Product) -> CartMutationResult:
        if product.stock <= 0:
            logger.debug("Cart add ignored, product=%s out of stock", product.product_id)
            return CartMutationResult(
                change=CartChange.NO_OP_OUT_OF_STOCK,
                product_id=product.product_id,
            )

        existing = self._items.get(product.product_id)
        if existing is not None:
            item = CartItem(product=existing.product, quantity=existing.quantity + 1)
            self._items[product.product_id] = item
            return CartMutationResult(
                change=CartChange.INCREMENTED,
                product_id=product.product_id,
                quantity=item.quantity,
            )

        self._items[product.product_id] = CartItem(product=product, quantity=1)
        return CartMutationResult(
            change=CartChange.ADDED,
            product_id=product.product_id,
            quantity=1,
        )

    def update_quantity(self, product_id: str, delta: int) -> CartMutationResult:
        existing = self._items.get(product_id)
        if existing is None:
            return CartMutationResult(change=CartChange.NO_OP_ABSENT, product_id=product_id)

        new_quantity = max(1, existing.quantity + delta)
        if new_quantity > self._stock_lookup.stock_of(product_id):
            logger.debug(
                "Cart update ignored, product=%s quantity=%d exceeds stock",
                product_id, new_quantity,
            )
            return CartMutationResult(
                change=CartChange.NO_OP_EXCEEDS_STOCK,
                product_id=product_id,
                quantity=existing.quantity,
            )

        self._items[product_id] = CartItem(product=existing.product, quantity=new_quantity)
        return CartMutationResult(
            change=CartChange.UPDATED,
            product_id=product_id,
            quantity=new_quantity,
        )

    def remove_item(self, product_id: str) -> CartMutationResult:
        if self._items.pop(product_id, None) is None:
            return CartMutationResult(change=CartChange.NO_OP_ABSENT, product_id=product_id)
        return CartMutationResult(change=CartChange.REMOVED, product_id=product_id)

    def clear(self) -> CartMutationResult:
        self._items.clear()
        return CartMutationResult(change=CartChange.CLEARED)

    def entries(self) -> Tuple[CartItem, ...]:
        return tuple(self._items.values())

    def get(self, product_id: str):
        return self._items.get(product_id)

    def total(self) -> int:
        return sum(item.line_total for item in self._items.values())

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items.values())

    def snapshot(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self._items.values()],
            "total": self.total(),
            "item_count": self.item_count,
        }
