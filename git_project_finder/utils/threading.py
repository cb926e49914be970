"""Threading utilities for sizing the discovery worker pool."""

import os
import sys
from typing import Any, Dict, Optional


def is_free_threading_enabled() -> bool:
    """Detect if Python is running with free-threading enabled.

    Returns:
        True if running on Python 3.13+ with GIL disabled (free-threading mode)
        False if running with GIL enabled or Python < 3.13
    """
    try:
        # sys._is_gil_enabled() returns False when GIL is disabled
        return hasattr(sys, "_is_gil_enabled") and not sys._is_gil_enabled()
    except Exception:
        return False


def get_python_threading_mode() -> str:
    """Get a description of the current threading mode."""
    if not hasattr(sys, "_is_gil_enabled"):
        return "GIL-enabled (Python < 3.13)"
    return "free-threading" if is_free_threading_enabled() else "GIL-enabled"


def get_optimal_worker_count(user_specified: Optional[int] = None, task_count: Optional[int] = None) -> int:
    """Calculate the worker count for running git subprocesses in parallel.

    Args:
        user_specified: User-specified worker count, if provided
        task_count: Number of tasks to run; the pool is never larger than this

    Returns:
        Number of workers, at least 1
    """
    if user_specified is not None and user_specified > 0:
        workers = user_specified
    else:
        cpu_count = os.cpu_count() or 1
        if is_free_threading_enabled():
            workers = min(64, cpu_count * 2)
        else:
            # Subprocess calls are I/O-bound
            workers = min(32, cpu_count + 4)

    if task_count is not None:
        workers = min(workers, task_count)
    return max(1, workers)


def get_threading_info() -> Dict[str, Any]:
    """Get information about the Python threading configuration."""
    return {
        "mode": get_python_threading_mode(),
        "free_threading": is_free_threading_enabled(),
        "cpu_count": os.cpu_count() or 1,
        "optimal_workers": get_optimal_worker_count(),
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    }
