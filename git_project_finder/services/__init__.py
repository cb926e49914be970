"""Services for git-project-finder."""

from .config_loader import load_projects_config
from .worktree_parser import normalize_branch_name, parse_worktree_list
from .project_resolver import ProjectResolver
from .tree_flattener import flatten_projects
from .display_service import DisplayService

__all__ = [
    "load_projects_config",
    "normalize_branch_name",
    "parse_worktree_list",
    "ProjectResolver",
    "flatten_projects",
    "DisplayService",
]
