"""
Cli package.
"""

from .cli_ui import (
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_MUTED,
    COLOR_RUNNING,
    COLOR_SUCCESS,
    COLOR_WARNING,
    InfoPanel,
    TableDisplay,
    print_error,
    print_heading,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "COLOR_MUTED",
    "COLOR_RUNNING",
    "COLOR_SUCCESS",
    "COLOR_WARNING",
    "InfoPanel",
    "TableDisplay",
    "print_error",
    "print_heading",
    "print_info",
    "print_success",
    "print_warning",
]
