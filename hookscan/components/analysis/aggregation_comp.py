"""Aggregation of component records into the analysis result.

Pure functions, no I/O:

- ``aggregate_components`` — summary counts and the final AnalysisResult
- ``count_by_type`` — usage counts keyed by kind label
- ``calculate_distribution`` — usage-count buckets over stateful components
- ``rank_components`` — components ordered by usage count
"""

from collections.abc import Iterable, Sequence

from hookscan.helpers.dto.analysis_dto import AnalysisResult, AnalysisSummary, ComponentRecord, StateUsage

DISTRIBUTION_BUCKETS: tuple[tuple[str, int, int | None], ...] = (
    ("1-2 states", 1, 2),
    ("3-5 states", 3, 5),
    ("6-10 states", 6, 10),
    ("11+ states", 11, None),
)

DEFAULT_TOP_LIMIT = 10


def count_by_type(usages: Iterable[StateUsage]) -> dict[str, int]:
    """Count usages per kind label, in order of first occurrence."""
    counts: dict[str, int] = {}
    for usage in usages:
        counts[usage.kind.value] = counts.get(usage.kind.value, 0) + 1
    return counts


def aggregate_components(components: Sequence[ComponentRecord]) -> AnalysisResult:
    """Fold component records into an AnalysisResult.

    Component order is kept as given (discovery order). Suggestions are
    always empty.
    """
    all_usages = [usage for component in components for usage in component.usages]

    return AnalysisResult(
        summary=AnalysisSummary(
            total_components=len(components),
            total_state_usages=len(all_usages),
            by_type=count_by_type(all_usages),
        ),
        components=list(components),
        suggestions=[],
    )


def calculate_distribution(components: Iterable[ComponentRecord]) -> dict[str, int]:
    """Bucket components by usage count; components without usages are left out."""
    distribution = {label: 0 for label, _, _ in DISTRIBUTION_BUCKETS}

    for component in components:
        count = len(component.usages)
        if count == 0:
            continue
        for label, low, high in DISTRIBUTION_BUCKETS:
            if count >= low and (high is None or count <= high):
                distribution[label] += 1
                break

    return distribution


def rank_components(components: Iterable[ComponentRecord], limit: int = DEFAULT_TOP_LIMIT) -> list[ComponentRecord]:
    """Stateful components by descending usage count; ties keep discovery order."""
    stateful = [c for c in components if c.usages]
    return sorted(stateful, key=lambda c: len(c.usages), reverse=True)[:limit]
