"""
BangunanPro Context - Public API
==================================
"""

from core.context.actor_context import ActorContext
from core.context.store_context import StoreContext

__all__ = [
    "ActorContext",
    "StoreContext",
]
