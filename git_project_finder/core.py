"""Core functionality for git-project-finder"""

from typing import List, Optional, Union

from git_project_finder.config import Config
from git_project_finder.formatters import matches_query
from git_project_finder.logging_config import get_logger
from git_project_finder.models.project import FinderResult, FlatEntry
from git_project_finder.services.config_loader import load_projects_config
from git_project_finder.services.project_resolver import ProjectResolver
from git_project_finder.services.tree_flattener import flatten_projects

logger = get_logger(__name__)


class ProjectFinder:
    """Finds configured projects and lists their worktrees."""

    def __init__(self, config: Union[Config, dict, None] = None):
        """Initialize the finder.

        Args:
            config: Config object or dictionary (None = defaults)
        """
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.resolver = ProjectResolver(sequential=config.sequential, workers=config.workers)

    def find(self, refresh: Optional[bool] = None) -> FinderResult:
        """Load the config, resolve every project and flatten the result.

        Missing or invalid config files, failing git commands and malformed
        worktree output never raise; they show up as fewer entries and, where
        the user should know, as diagnostics.

        Args:
            refresh: Bypass the in-memory cache (defaults to config.refresh)
        """
        if refresh is None:
            refresh = self.config.refresh

        loaded = load_projects_config(self.config.config_path)
        diagnostics = [loaded.diagnostic] if loaded.diagnostic else []

        resolution = self.resolver.resolve(loaded.projects, refresh=refresh)
        diagnostics.extend(resolution.diagnostics)

        entries = flatten_projects(resolution.projects)
        logger.info(f"Found {len(entries)} worktrees in {len(resolution.projects)} projects")
        return FinderResult(entries=entries, diagnostics=diagnostics)

    def search(self, query: str, entries: Optional[List[FlatEntry]] = None) -> List[FlatEntry]:
        """Entries matching a search query.

        Args:
            query: Whitespace separated search terms
            entries: Entries to filter (None = run find())
        """
        if entries is None:
            entries = self.find().entries
        return [entry for entry in entries if matches_query(entry, query, self.config.base_path)]
