"""
CLI output types.
"""

from .result_types import (
    AnalysisResultResponse,
    AnalysisSummaryResponse,
    ComponentResponse,
    StateUsageResponse,
    SuggestionResponse,
)

__all__ = [
    "AnalysisResultResponse",
    "AnalysisSummaryResponse",
    "ComponentResponse",
    "StateUsageResponse",
    "SuggestionResponse",
]
