"""Worktree data models."""

from dataclasses import dataclass
from typing import Optional

from git_project_finder.constants import BARE_PLACEHOLDER


@dataclass(frozen=True)
class WorktreeRecord:
    """One record of `git worktree list --porcelain` output."""

    directory: str
    is_main_worktree: bool = False  # directory == configured project root
    branch: Optional[str] = None
    head: Optional[str] = None
    is_detached: bool = False
    is_bare: bool = False
    is_locked: bool = False
    lock_reason: Optional[str] = None
    is_prunable: bool = False
    prunable_reason: Optional[str] = None

    @property
    def display_branch(self) -> str:
        """Branch name, else HEAD commit, else the bare placeholder."""
        return self.branch or self.head or BARE_PLACEHOLDER

    def __str__(self) -> str:
        """String representation of worktree."""
        main_marker = " (main)" if self.is_main_worktree else ""
        return f"{self.display_branch} @ {self.directory}{main_marker}"
