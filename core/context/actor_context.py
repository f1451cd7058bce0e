"""
BangunanPro Context - ActorContext
====================================
Immutable identity of the staff member performing an operation.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.permissions.constants import VALID_ROLES


@dataclass(frozen=True)
class ActorContext:
    """
    Canonical actor identity context.

    actor_name is what ends up on receipts as cashier name.
    Authorization is evaluated by core.permissions, not cached here.
    """

    actor_id: str
    actor_name: str
    role: str

    def __post_init__(self):
        if not self.actor_id or not isinstance(self.actor_id, str):
            raise ValueError("actor_id must be a non-empty string.")

        if not self.actor_name or not isinstance(self.actor_name, str):
            raise ValueError("actor_name must be a non-empty string.")

        if self.role not in VALID_ROLES:
            raise ValueError(
                f"role '{self.role}' not valid. "
                f"Must be one of: {sorted(VALID_ROLES)}"
            )

    def to_dict(self) -> dict:
        return {
            "actor_id": self.actor_id,
            "actor_name": self.actor_name,
            "role": self.role,
        }
