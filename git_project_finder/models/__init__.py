"""Data models for git-project-finder."""

from .worktree import WorktreeRecord
from .project import (
    ConfigLoadResult,
    Diagnostic,
    FinderResult,
    FlatEntry,
    ProjectConfigEntry,
    ProjectNode,
    ProjectsConfig,
    ResolutionResult,
)

__all__ = [
    "WorktreeRecord",
    "ConfigLoadResult",
    "Diagnostic",
    "FinderResult",
    "FlatEntry",
    "ProjectConfigEntry",
    "ProjectNode",
    "ProjectsConfig",
    "ResolutionResult",
]
