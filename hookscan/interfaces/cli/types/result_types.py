"""
Analysis result output types.

External JSON contract for saved analysis results.
These are Pydantic models that transform internal DTOs into the output shape.

Architecture:
- These types are owned by the interface layer
- Field names are camelCase on the wire (totalComponents, stateUsages, ...)
- They transform internal DTOs via .from_dto() classmethods
- Components and workflows should NOT import from this module
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from hookscan.helpers.dto.analysis_dto import (
    AnalysisResult,
    AnalysisSummary,
    ComponentRecord,
    StateUsage,
    Suggestion,
)

# ──────────────────────────────────────────────────────────────────────
# Result Output Types (DTO → Pydantic mappings)
# ──────────────────────────────────────────────────────────────────────


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StateUsageResponse(_CamelModel):
    """
    Single state call site.

    ``type`` is the kind label, ``name`` the matched hook token.
    """

    type: str
    name: str
    file: str
    line: int
    component: str

    @classmethod
    def from_dto(cls, usage: StateUsage) -> Self:
        return cls(
            type=usage.kind.value,
            name=usage.token,
            file=usage.file,
            line=usage.line,
            component=usage.component,
        )


class ComponentResponse(_CamelModel):
    """Single component with its state usages."""

    name: str
    file: str
    state_usages: list[StateUsageResponse]
    children: list[str]

    @classmethod
    def from_dto(cls, component: ComponentRecord) -> Self:
        return cls(
            name=component.name,
            file=component.file,
            state_usages=[StateUsageResponse.from_dto(u) for u in component.usages],
            children=list(component.children),
        )


class SuggestionResponse(_CamelModel):
    """Advisory message (reserved)."""

    type: str
    message: str
    file: str
    component: str

    @classmethod
    def from_dto(cls, suggestion: Suggestion) -> Self:
        return cls(
            type=suggestion.type,
            message=suggestion.message,
            file=suggestion.file,
            component=suggestion.component,
        )


class AnalysisSummaryResponse(_CamelModel):
    """Project-level counts."""

    total_components: int
    total_state_usages: int
    by_type: dict[str, int]

    @classmethod
    def from_dto(cls, summary: AnalysisSummary) -> Self:
        return cls(
            total_components=summary.total_components,
            total_state_usages=summary.total_state_usages,
            by_type=dict(summary.by_type),
        )


class AnalysisResultResponse(_CamelModel):
    """
    Whole analysis result.

    Maps directly to AnalysisResult DTO from helpers/dto/analysis_dto.py
    """

    summary: AnalysisSummaryResponse
    components: list[ComponentResponse]
    suggestions: list[SuggestionResponse]

    @classmethod
    def from_dto(cls, result: AnalysisResult) -> Self:
        """
        Transform internal AnalysisResult DTO to the JSON output model.

        Args:
            result: Result from the analyze workflow

        Returns:
            Output model; dump with ``by_alias=True`` for camelCase keys
        """
        return cls(
            summary=AnalysisSummaryResponse.from_dto(result.summary),
            components=[ComponentResponse.from_dto(c) for c in result.components],
            suggestions=[SuggestionResponse.from_dto(s) for s in result.suggestions],
        )
