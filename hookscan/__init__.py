"""hookscan - static analysis of state management in React component sources."""

from hookscan.__version__ import __version__
from hookscan.helpers.dto.analysis_dto import (
    AnalysisResult,
    AnalysisSummary,
    ComponentRecord,
    StateKind,
    StateUsage,
    Suggestion,
)
from hookscan.helpers.exceptions import ConfigError, HookscanError, SourceParseError, SourceRootError
from hookscan.workflows.analyze_wf import analyze_state_workflow

__all__ = [
    "__version__",
    # Workflow
    "analyze_state_workflow",
    # Models
    "AnalysisResult",
    "AnalysisSummary",
    "ComponentRecord",
    "StateKind",
    "StateUsage",
    "Suggestion",
    # Exceptions
    "HookscanError",
    "SourceRootError",
    "SourceParseError",
    "ConfigError",
]
