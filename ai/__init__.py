"""
BangunanPro AI Module - Advisory Only
=======================================
AI components are advisory only. AI CANNOT commit state: advisors read
projections and return text, nothing more.
"""

from ai.advisors import AdvisoryAnswer, AdvisoryStatus, BusinessAdvisor, GeminiClient

__all__ = [
    "AdvisoryAnswer",
    "AdvisoryStatus",
    "BusinessAdvisor",
    "GeminiClient",
]
