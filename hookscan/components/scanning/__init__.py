"""
Scanning package.
"""

from .source_locator_comp import (
    DEFAULT_EXCLUDED_DIRS,
    SOURCE_EXTENSIONS,
    is_excluded_file,
    locate_source_files,
    relative_source_path,
    resolve_analysis_root,
)

__all__ = [
    "DEFAULT_EXCLUDED_DIRS",
    "SOURCE_EXTENSIONS",
    "is_excluded_file",
    "locate_source_files",
    "relative_source_path",
    "resolve_analysis_root",
]
