"""
BangunanPro AI Advisors - Base Types
======================================
Advisors are read-only: they consume projections and return free text.
They never mutate store state and never raise for configuration or
upstream failures; the caller always gets an AdvisoryAnswer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Protocol


MISSING_CONFIGURATION_MESSAGE = (
    "Error: API Key is missing. Please check your configuration."
)
EMPTY_ANSWER_MESSAGE = "Maaf, saya tidak dapat menganalisis data saat ini."
UPSTREAM_FAILURE_MESSAGE = "Terjadi kesalahan saat menghubungi asisten AI."


class AdvisoryStatus(Enum):
    ANSWERED = "ANSWERED"
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
    FALLBACK = "FALLBACK"


# ══════════════════════════════════════════════════════════════
# ADVISORY OUTPUT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AdvisoryAnswer:
    """
    Answer to one advisory request.

    sequence is the request number issued by the advisor. superseded is
    True when a newer request was issued before this one completed; such
    answers are returned to the caller but never become the latest answer.
    """

    text: str
    status: AdvisoryStatus
    sequence: int
    superseded: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.status, AdvisoryStatus):
            raise ValueError("status must be AdvisoryStatus.")
        if self.sequence < 1:
            raise ValueError(f"sequence must be >= 1, got {self.sequence}.")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "status": self.status.value,
            "sequence": self.sequence,
            "superseded": self.superseded,
        }


# ══════════════════════════════════════════════════════════════
# CLIENT PROTOCOL
# ══════════════════════════════════════════════════════════════

class AdvisoryClient(Protocol):
    """
    Language-model transport.

    generate() returns the model text ("" when the model produced none),
    raises ConfigurationMissing when no credential is configured and
    UpstreamFailure for network or protocol errors.
    """

    async def generate(self, prompt: str) -> str:
        ...
