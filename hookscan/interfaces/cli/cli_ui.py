#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent console output across commands.
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_RUNNING = "blue"
COLOR_MUTED = "grey50"


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for summaries and rankings.
    """

    @staticmethod
    def show_summary(title: str, data: dict[str, Any], border_style: str = COLOR_INFO):
        """Display a two-column metric table."""
        table = Table(title=title, box=box.ROUNDED, show_header=False, border_style=border_style)
        table.add_column("Metric", style="bold")
        table.add_column("Value", style=COLOR_INFO)

        for key, value in data.items():
            table.add_row(key, str(value))

        console.print(table)

    @staticmethod
    def show_rows(title: str, columns: list[tuple[str, dict[str, Any]]], rows: list[list[str]]):
        """Display an arbitrary table; ``columns`` is (header, add_column kwargs) pairs."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        for header, options in columns:
            table.add_column(header, **options)
        for row in rows:
            table.add_row(*row)
        console.print(table)


def print_heading(message: str):
    """Print a bold section heading followed by a blank line."""
    console.print(f"[bold]=== {message} ===[/bold]\n")


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message to stderr."""
    err_console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_RUNNING}]{message}[/{COLOR_RUNNING}]")
