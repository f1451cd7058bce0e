"""
BangunanPro Command Layer - Public API
========================================
Rejections are first-class results of store operations.
"""

from core.commands.rejection import (
    ReasonCode,
    RejectionReason,
)

__all__ = [
    "ReasonCode",
    "RejectionReason",
]
