"""Shared constants for git-project-finder."""

import os
from dataclasses import dataclass
from typing import List, Tuple

HOME = os.path.expanduser("~")

# Default location of the projects config file
CONFIG_FOLDER_NAME = ".flo-cli"
CONFIG_FILE_NAME = "flo-cli.jsonc"
DEFAULT_CONFIG_PATH = os.path.join(HOME, ".config", CONFIG_FOLDER_NAME, CONFIG_FILE_NAME)
CONFIG_PATH_ENV_VAR = "GIT_PROJECT_FINDER_CONFIG"

# Prefix removed from directories when displaying them
DEFAULT_BASE_PATH = os.path.join(HOME, "coding") + os.sep

# Ref namespaces stripped from branch names, applied in this order, once each
BRANCH_PREFIXES: Tuple[str, ...] = ("refs/", "heads/", "remotes/", "origin/")

# Shown when a worktree has neither a branch nor a HEAD
BARE_PLACEHOLDER = "Bare"

WORKTREE_LIST_ARGS: Tuple[str, ...] = ("list", "--porcelain")


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("project", "Project", 24),
    ColumnDefinition("branch", "Branch", 30),
    ColumnDefinition("directory", "Directory"),
    ColumnDefinition("main", "Main", 4),
]

SYMBOL_MAIN_WORKTREE = "✓"
SYMBOL_LINKED_WORKTREE = ""

# Seconds a resolution result may be served from the in-memory cache
DEFAULT_CACHE_TTL = 30.0
