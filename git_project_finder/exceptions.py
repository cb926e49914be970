"""Custom exceptions for git-project-finder"""

from typing import Optional


class GitProjectFinderError(Exception):
    """Base exception for all git-project-finder errors."""
    pass


class ConfigError(GitProjectFinderError):
    """Exception raised when the projects config file cannot be used."""

    def __init__(self, config_path: str, message: Optional[str] = None):
        self.config_path = config_path
        self.message = message

        error_msg = f"Invalid config file at '{config_path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class DiscoveryCommandError(GitProjectFinderError):
    """Exception raised when listing the worktrees of a project fails."""

    def __init__(self, root: str, message: Optional[str] = None):
        self.root = root
        self.message = message

        error_msg = f"git worktree list failed in '{root}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class WorktreeParseError(GitProjectFinderError):
    """Exception raised for errors while parsing worktree list output."""
    pass


class MalformedWorktreeRecordError(WorktreeParseError):
    """Exception raised when a porcelain record has no worktree line."""

    def __init__(self, block: str):
        self.block = block
        super().__init__(f"Couldn't match a directory in:\n{block}")
