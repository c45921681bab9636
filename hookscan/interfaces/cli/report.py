"""
Console report for an analysis result.

Sections: summary counts, usage by type, state distribution bars, the top
components ranking and (verbose) per-component line listing.
"""

from __future__ import annotations

from rich.markup import escape

from hookscan.components.analysis.aggregation_comp import (
    DEFAULT_TOP_LIMIT,
    calculate_distribution,
    count_by_type,
    rank_components,
)
from hookscan.helpers.dto.analysis_dto import AnalysisResult, ComponentRecord
from hookscan.interfaces.cli.cli_ui import (
    COLOR_INFO,
    COLOR_MUTED,
    COLOR_SUCCESS,
    COLOR_WARNING,
    InfoPanel,
    TableDisplay,
    console,
    print_heading,
)

BAR_CHAR = "█"
BAR_MAX_WIDTH = 20


def format_percentage(part: int, total: int) -> str:
    """One-decimal percentage, "0" when there is nothing to divide by."""
    return f"{part / total * 100:.1f}" if total > 0 else "0"


def format_average(total: int, count: int) -> str:
    return f"{total / count:.1f}" if count > 0 else "0"


def format_bar(count: int) -> str:
    return BAR_CHAR * min(count, BAR_MAX_WIDTH)


def format_pattern_counts(component: ComponentRecord) -> str:
    """``"useState(2), redux(1)"`` for a component's usages."""
    return ", ".join(f"{kind}({count})" for kind, count in count_by_type(component.usages).items())


def print_summary(result: AnalysisResult) -> None:
    """Print aggregate counts, usage by type and the state distribution."""
    print_heading("Analysis Summary")

    summary = result.summary
    with_state = sum(1 for c in result.components if c.usages)

    TableDisplay.show_summary(
        "Totals",
        {
            "Total components": summary.total_components,
            "Components with state": (
                f"{with_state} ({format_percentage(with_state, summary.total_components)}%)"
            ),
            "Total state usage": summary.total_state_usages,
            "Average": f"{format_average(summary.total_state_usages, with_state)} states/component",
        },
    )
    console.print()

    console.print("Usage by type:")
    for kind, count in summary.by_type.items():
        console.print(f"  {kind}: [{COLOR_WARNING}]{count}[/{COLOR_WARNING}]")
    console.print()

    console.print("State distribution:")
    for label, count in calculate_distribution(result.components).items():
        console.print(
            f"  {label:<12} [{COLOR_INFO}]{format_bar(count)}[/{COLOR_INFO}] [{COLOR_MUTED}]({count})[/{COLOR_MUTED}]",
        )
    console.print()


def print_top_components(result: AnalysisResult, limit: int = DEFAULT_TOP_LIMIT) -> None:
    """Print the components with the most state usages."""
    print_heading(f"Top {limit} Components")

    ranked = rank_components(result.components, limit)
    if not ranked:
        console.print(f"[{COLOR_MUTED}]No components with state found.[/{COLOR_MUTED}]\n")
        return

    rows = [
        [
            str(index),
            escape(component.name),
            str(len(component.usages)),
            format_pattern_counts(component),
            escape(component.file),
        ]
        for index, component in enumerate(ranked, start=1)
    ]
    TableDisplay.show_rows(
        f"Top {limit} Components",
        [
            ("#", {"style": COLOR_INFO, "justify": "right"}),
            ("Component", {"style": COLOR_SUCCESS}),
            ("States", {"justify": "right"}),
            ("Patterns", {"style": COLOR_WARNING, "overflow": "fold"}),
            ("File", {"style": COLOR_MUTED, "overflow": "fold"}),
        ],
        rows,
    )
    console.print()


def print_details(result: AnalysisResult) -> None:
    """Print every stateful component with its usages by line."""
    print_heading("Component Details")

    for component in result.components:
        if not component.usages:
            continue
        lines = "\n".join(f"- {usage.kind.value}: [{COLOR_MUTED}]line {usage.line}[/{COLOR_MUTED}]" for usage in component.usages)
        InfoPanel.show(escape(f"{component.name} ({component.file})"), lines, COLOR_SUCCESS)
    console.print()


def print_report(result: AnalysisResult, verbose: bool = False, top_limit: int = DEFAULT_TOP_LIMIT) -> None:
    """Print the full console report."""
    print_summary(result)
    print_top_components(result, top_limit)
    if verbose:
        print_details(result)
