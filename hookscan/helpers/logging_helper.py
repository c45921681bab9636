"""
Logging setup shared by the CLI entry points.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed once, by whoever owns the process.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: str | int) -> int:
    """
    Turn a level name ("debug", "WARNING") or number into a logging level.

    Unknown names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure logging once for the whole process."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT, force=True)
