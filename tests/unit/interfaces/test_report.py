"""Unit tests for the console report."""

import pytest

from hookscan.helpers.dto.analysis_dto import ComponentRecord, StateKind, StateUsage
from hookscan.interfaces.cli import cli_ui
from hookscan.interfaces.cli.report import (
    format_average,
    format_bar,
    format_pattern_counts,
    format_percentage,
    print_details,
    print_report,
    print_summary,
    print_top_components,
)
from hookscan.workflows.analyze_wf import analyze_state_workflow


@pytest.fixture
def wide_console(monkeypatch):
    """Keep rich from wrapping table cells."""
    monkeypatch.setattr(cli_ui.console, "width", 200)


@pytest.mark.unit
class TestFormatters:
    def test_percentage(self):
        assert format_percentage(3, 4) == "75.0"
        assert format_percentage(0, 0) == "0"

    def test_average(self):
        assert format_average(8, 3) == "2.7"
        assert format_average(0, 0) == "0"

    def test_bar_is_capped(self):
        assert format_bar(3) == "███"
        assert format_bar(0) == ""
        assert len(format_bar(45)) == 20

    def test_pattern_counts(self):
        usages = [
            StateUsage(kind=kind, token=kind.value, file="a.tsx", line=1, component="A")
            for kind in (StateKind.LOCAL_STATE, StateKind.REDUX, StateKind.LOCAL_STATE)
        ]

        assert format_pattern_counts(ComponentRecord(name="A", file="a.tsx", usages=usages)) == "useState(2), redux(1)"


@pytest.mark.unit
@pytest.mark.usefixtures("wide_console")
class TestPrintReport:
    """Test the printed sections."""

    def test_summary(self, sample_project, capsys):
        result = analyze_state_workflow(sample_project)

        print_summary(result)

        out = capsys.readouterr().out
        assert "Total components" in out
        assert "3 (75.0%)" in out
        assert "2.7 states/component" in out
        assert "jotai: 2" in out
        assert "1-2 states" in out
        assert "██ (2)" in out
        assert "11+ states" in out

    def test_top_components_order(self, sample_project, capsys):
        result = analyze_state_workflow(sample_project)

        print_top_components(result, limit=2)

        out = capsys.readouterr().out
        assert "Top 2 Components" in out
        assert out.index("TodoList") < out.index("Counter")
        assert "App.tsx" not in out

    def test_top_components_empty(self, tmp_path, capsys):
        result = analyze_state_workflow(tmp_path)

        print_top_components(result)

        assert "No components with state found." in capsys.readouterr().out

    def test_details_lists_lines(self, sample_project, capsys):
        result = analyze_state_workflow(sample_project)

        print_details(result)

        out = capsys.readouterr().out
        assert "useReducer: line 3" in out
        assert "CounterLabel" not in out

    def test_names_are_not_read_as_markup(self, write_source, tmp_path, capsys):
        """Should print bracketed route file names literally."""
        write_source("pages/[id].tsx", "export const Page = () => { useState(0); return <div />; };\n")
        result = analyze_state_workflow(tmp_path)

        print_report(result, verbose=True)

        assert "pages/[id].tsx" in capsys.readouterr().out

    def test_verbose_toggles_details(self, sample_project, capsys):
        result = analyze_state_workflow(sample_project)

        print_report(result)
        quiet = capsys.readouterr().out
        print_report(result, verbose=True)
        verbose = capsys.readouterr().out

        assert "Component Details" not in quiet
        assert "Component Details" in verbose
