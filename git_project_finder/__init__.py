"""
git-project-finder - Find configured projects and their git worktrees
"""

from .__version__ import __version__
from .core import ProjectFinder
from .cli.main import main

__all__ = ["ProjectFinder", "main", "__version__"]
