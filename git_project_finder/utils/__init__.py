"""Utility functions for git-project-finder.

This package provides utility modules:
- jsonc: Comment and trailing-comma stripping for JSON config files
- threading: Worker pool sizing
"""

from .jsonc import strip_json_comments
from .threading import (
    is_free_threading_enabled,
    get_python_threading_mode,
    get_optimal_worker_count,
    get_threading_info,
)

__all__ = [
    "strip_json_comments",
    "is_free_threading_enabled",
    "get_python_threading_mode",
    "get_optimal_worker_count",
    "get_threading_info",
]
