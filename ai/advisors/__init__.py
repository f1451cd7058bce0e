"""
BangunanPro AI Advisors
=========================
"""

from ai.advisors.base import (
    EMPTY_ANSWER_MESSAGE,
    MISSING_CONFIGURATION_MESSAGE,
    UPSTREAM_FAILURE_MESSAGE,
    AdvisoryAnswer,
    AdvisoryClient,
    AdvisoryStatus,
)
from ai.advisors.business_advisor import BusinessAdvisor
from ai.advisors.gemini_client import GeminiClient

__all__ = [
    "AdvisoryAnswer",
    "AdvisoryClient",
    "AdvisoryStatus",
    "BusinessAdvisor",
    "GeminiClient",
    "EMPTY_ANSWER_MESSAGE",
    "MISSING_CONFIGURATION_MESSAGE",
    "UPSTREAM_FAILURE_MESSAGE",
]
