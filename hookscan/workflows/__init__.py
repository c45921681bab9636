"""
Workflows package.
"""

from .analyze_wf import analyze_state_workflow

__all__ = [
    "analyze_state_workflow",
]
