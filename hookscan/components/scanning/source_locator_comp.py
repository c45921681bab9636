"""Source file discovery for state analysis.

Walks an analysis root and returns the component source files worth parsing:

- ``locate_source_files`` — recursive walk with directory pruning and file filters
- ``is_excluded_file`` — name-based filters (tests, declarations, build config)
- ``relative_source_path`` — POSIX path relative to the analysis root
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from hookscan.helpers.exceptions import SourceRootError

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = (".tsx", ".ts")

# Dependency and build output directories, always pruned at any depth
DEFAULT_EXCLUDED_DIRS = ("node_modules", "dist", "build")

# Substrings of a file name that mark it as non-source
_EXCLUDED_NAME_MARKERS = (".test.", ".spec.", ".config.")
_DECLARATION_SUFFIX = ".d.ts"


def is_excluded_file(file_name: str) -> bool:
    """Return True for test files, type declarations and build configuration."""
    if file_name.endswith(_DECLARATION_SUFFIX):
        return True
    return any(marker in file_name for marker in _EXCLUDED_NAME_MARKERS)


def relative_source_path(path: Path, root: Path) -> str:
    """Path of ``path`` relative to ``root`` with forward slashes."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def resolve_analysis_root(root: str | Path) -> Path:
    """Absolute analysis root, validated to be an existing directory."""
    resolved = Path(root).expanduser().resolve()
    if not resolved.exists():
        raise SourceRootError(f"Analysis root does not exist: {resolved.as_posix()}")
    if not resolved.is_dir():
        raise SourceRootError(f"Analysis root is not a directory: {resolved.as_posix()}")
    return resolved


def locate_source_files(
    root: str | Path,
    excluded_dirs: Iterable[str] = (),
) -> list[Path]:
    """Find every component source file under ``root``.

    Args:
        root: Analysis root, absolute or relative to the working directory
        excluded_dirs: Extra directory names pruned on top of DEFAULT_EXCLUDED_DIRS

    Returns:
        Absolute paths sorted by their POSIX path relative to ``root``.
        An empty list when nothing matches.

    Raises:
        SourceRootError: If ``root`` is missing or not a directory

    """
    resolved_root = resolve_analysis_root(root)
    pruned = set(DEFAULT_EXCLUDED_DIRS) | set(excluded_dirs)
    found: list[Path] = []

    def _on_walk_error(error: OSError) -> None:
        if Path(error.filename or "") == resolved_root:
            raise SourceRootError(f"Cannot read analysis root {resolved_root.as_posix()}: {error}") from error
        logger.warning("[locator] Cannot access %s: %s", error.filename, error)

    for dirpath, dirnames, filenames in os.walk(resolved_root, onerror=_on_walk_error):
        # Prune in place so os.walk never descends into excluded trees
        dirnames[:] = [d for d in dirnames if d not in pruned]

        for file_name in filenames:
            if os.path.splitext(file_name)[1] not in SOURCE_EXTENSIONS:
                continue
            if is_excluded_file(file_name):
                continue
            found.append(Path(dirpath) / file_name)

    found.sort(key=lambda p: relative_source_path(p, resolved_root))
    logger.debug("[locator] Found %d source files under %s", len(found), resolved_root.as_posix())
    return found
