"""
BangunanPro AI Advisors - Business Advisor
============================================
Answers free-text questions about the store using the metrics digest.

Requests are tagged with a monotonically increasing sequence number.
When an older request finishes after a newer one was issued, its answer
is discarded: latest_answer is never overwritten by a stale response.
"""

from __future__ import annotations

import logging
from typing import Optional

from ai.advisors.base import (
    EMPTY_ANSWER_MESSAGE,
    MISSING_CONFIGURATION_MESSAGE,
    UPSTREAM_FAILURE_MESSAGE,
    AdvisoryAnswer,
    AdvisoryClient,
    AdvisoryStatus,
)
from core.errors import ConfigurationMissing, UpstreamFailure

logger = logging.getLogger("bangunan.ai")


class BusinessAdvisor:
    def __init__(
        self,
        *,
        metrics,
        client: AdvisoryClient,
        store_description: str = "Building Material Store (Toko Bangunan)",
    ):
        self._metrics = metrics
        self._client = client
        self._store_description = store_description
        self._sequence = 0
        self._latest: Optional[AdvisoryAnswer] = None

    @property
    def latest_answer(self) -> Optional[AdvisoryAnswer]:
        return self._latest

    @property
    def last_sequence(self) -> int:
        return self._sequence

    def build_prompt(self, question: str) -> str:
        return (
            f"You are an intelligent business assistant for a "
            f"{self._store_description}.\n"
            f"{self._metrics.summary_context()}\n\n"
            f"User Question: {question}\n\n"
            f"Provide a concise, professional, and helpful answer in Indonesian."
        )

    async def ask(self, question: str) -> Optional[AdvisoryAnswer]:
        """Blank questions are ignored and return None."""
        question = (question or "").strip()
        if not question:
            return None

        self._sequence += 1
        sequence = self._sequence
        # digest is taken when the question is asked, not when it is answered
        prompt = self.build_prompt(question)

        try:
            text = await self._client.generate(prompt)
        except ConfigurationMissing:
            logger.warning("Advisor request %d skipped: API key missing", sequence)
            text, status = MISSING_CONFIGURATION_MESSAGE, AdvisoryStatus.CONFIGURATION_MISSING
        except UpstreamFailure:
            logger.error("Advisor request %d failed", sequence, exc_info=True)
            text, status = UPSTREAM_FAILURE_MESSAGE, AdvisoryStatus.FALLBACK
        else:
            if text:
                status = AdvisoryStatus.ANSWERED
            else:
                logger.warning("Advisor request %d returned an empty answer", sequence)
                text, status = EMPTY_ANSWER_MESSAGE, AdvisoryStatus.FALLBACK

        superseded = sequence < self._sequence
        answer = AdvisoryAnswer(
            text=text, status=status, sequence=sequence, superseded=superseded
        )
        if superseded:
            logger.debug(
                "Advisor request %d superseded by %d, answer discarded",
                sequence, self._sequence,
            )
        else:
            self._latest = answer
        return answer
