"""
DTO package.
"""

from .analysis_dto import (
    AnalysisResult,
    AnalysisSummary,
    ComponentRecord,
    StateKind,
    StateUsage,
    Suggestion,
)

__all__ = [
    "AnalysisResult",
    "AnalysisSummary",
    "ComponentRecord",
    "StateKind",
    "StateUsage",
    "Suggestion",
]
