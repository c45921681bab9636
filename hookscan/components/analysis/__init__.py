"""
Analysis package.
"""

from .aggregation_comp import aggregate_components, calculate_distribution, count_by_type, rank_components
from .component_classifier_comp import classify_components, has_markup_return, is_component_name, is_non_component_file
from .state_usage_comp import DEFAULT_PATTERNS, StatePattern, build_pattern_table, find_state_usages
from .syntax_tree_comp import ParsedSource, parse_source_file

__all__ = [
    "DEFAULT_PATTERNS",
    "ParsedSource",
    "StatePattern",
    "aggregate_components",
    "build_pattern_table",
    "calculate_distribution",
    "classify_components",
    "count_by_type",
    "find_state_usages",
    "has_markup_return",
    "is_component_name",
    "is_non_component_file",
    "parse_source_file",
    "rank_components",
]
