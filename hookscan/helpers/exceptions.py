"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class HookscanError(Exception):
    """Base class for every error hookscan raises on purpose."""


class SourceRootError(HookscanError):
    """Raised when the analysis root does not exist or is not a directory.

    This is the only fatal condition of a scan; no partial result is produced.
    """


class SourceParseError(HookscanError):
    """Raised when a single source file cannot be read or parsed.

    The analyze workflow catches this per file and moves on.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse {path}: {reason}")


class ConfigError(HookscanError):
    """Raised when configuration values are present but unusable."""
