"""
Commands package.
"""

from .analyze_cli import cmd_analyze

__all__ = [
    "cmd_analyze",
]
