"""State analysis workflow - locate, classify and aggregate in one pass."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from hookscan.components.analysis.aggregation_comp import aggregate_components
from hookscan.components.analysis.component_classifier_comp import classify_components
from hookscan.components.analysis.state_usage_comp import DEFAULT_PATTERNS, StatePattern
from hookscan.components.analysis.syntax_tree_comp import parse_source_file
from hookscan.components.scanning.source_locator_comp import (
    locate_source_files,
    relative_source_path,
    resolve_analysis_root,
)
from hookscan.helpers.dto.analysis_dto import AnalysisResult, ComponentRecord
from hookscan.helpers.exceptions import SourceParseError

logger = logging.getLogger(__name__)


def analyze_state_workflow(
    root: str | Path,
    excluded_dirs: Iterable[str] = (),
    patterns: Sequence[StatePattern] = DEFAULT_PATTERNS,
) -> AnalysisResult:
    """Analyze state management across every component under ``root``.

    Files are processed in locator order; a file that cannot be read or
    parsed is logged and skipped without affecting the others.

    Args:
        root: Directory to scan
        excluded_dirs: Directory names to prune besides the built-in ones
        patterns: State pattern table

    Returns:
        AnalysisResult with components in discovery order

    Raises:
        SourceRootError: If ``root`` is missing, unreadable or not a directory

    """
    resolved_root = resolve_analysis_root(root)
    logger.info("[analyze] Scanning %s", resolved_root.as_posix())

    source_files = locate_source_files(resolved_root, excluded_dirs)
    logger.info("[analyze] Found %d candidate source files", len(source_files))

    components: list[ComponentRecord] = []
    skipped = 0

    for path in source_files:
        relative_path = relative_source_path(path, resolved_root)
        try:
            parsed = parse_source_file(path, relative_path)
        except SourceParseError as e:
            skipped += 1
            logger.warning("[analyze] Skipping %s: %s", relative_path, e.reason)
            continue

        file_components = classify_components(parsed, patterns)
        if file_components:
            logger.debug("[analyze] %s: %d component(s)", relative_path, len(file_components))
        components.extend(file_components)

    result = aggregate_components(components)
    logger.info(
        "[analyze] %d components, %d state usages (%d file(s) skipped)",
        result.summary.total_components,
        result.summary.total_state_usages,
        skipped,
    )
    return result
