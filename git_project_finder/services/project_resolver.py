"""Resolution of configured projects into project -> worktree trees."""

import time
from concurrent.futures import ThreadPoolExecutor
from threading import Lock
from typing import Dict, List, Optional, Tuple

import git

from git_project_finder.constants import DEFAULT_CACHE_TTL, WORKTREE_LIST_ARGS
from git_project_finder.exceptions import DiscoveryCommandError, WorktreeParseError
from git_project_finder.logging_config import get_logger
from git_project_finder.models.project import Diagnostic, ProjectNode, ResolutionResult
from git_project_finder.services.worktree_parser import parse_worktree_list
from git_project_finder.utils.threading import get_optimal_worker_count

logger = get_logger(__name__)


def run_worktree_list(root: str) -> str:
    """Run `git worktree list --porcelain` with root as working directory.

    Args:
        root: Project root directory

    Returns:
        Standard output of the command

    Raises:
        DiscoveryCommandError: If git cannot be started or exits non-zero
    """
    try:
        return git.Git(root).worktree(*WORKTREE_LIST_ARGS)
    except git.exc.GitCommandError as e:
        # Extract detailed error information from GitCommandError
        stderr = (e.stderr if hasattr(e, "stderr") else str(e)).strip()
        status = e.status if hasattr(e, "status") else "unknown"
        if stderr:
            message = f"exit {status}: {stderr}"
        else:
            message = f"exit code {status}"
        raise DiscoveryCommandError(root, message) from e
    except (git.exc.GitError, OSError) as e:
        raise DiscoveryCommandError(root, str(e)) from e


class ProjectResolver:
    """Builds a ProjectNode per configured project from its worktree list."""

    def __init__(
        self,
        sequential: bool = False,
        workers: Optional[int] = None,
        cache_ttl: float = DEFAULT_CACHE_TTL,
    ):
        """Initialize the resolver.

        Args:
            sequential: Resolve projects one after another instead of in a pool
            workers: Maximum number of parallel git processes (None = auto-detect)
            cache_ttl: Seconds a result is reused for the same projects (0 disables caching)
        """
        self.sequential = sequential
        self.workers = workers
        self.cache_ttl = cache_ttl
        self._cached_key: Optional[Tuple[Tuple[str, str], ...]] = None
        self._cached_result: Optional[ResolutionResult] = None
        self._cached_at = 0.0
        self._cache_lock = Lock()

    def clear_cache(self):
        """Forget the last resolution result."""
        with self._cache_lock:
            self._cached_key = None
            self._cached_result = None
            self._cached_at = 0.0

    def discover(self, root: str) -> str:
        """Worktree list output for root, or "" if the command failed."""
        try:
            return run_worktree_list(root)
        except DiscoveryCommandError as e:
            logger.debug(f"Could not list worktrees: {e}")
            return ""

    def resolve_project(self, name: str, root: str) -> Tuple[ProjectNode, Optional[Diagnostic]]:
        """Resolve a single project.

        A parse failure only affects this project: it comes back without
        children, together with a diagnostic describing the bad record.

        Args:
            name: Project name from the config file
            root: Project root directory

        Returns:
            Tuple of (node, diagnostic). diagnostic is None on success.
        """
        raw_output = self.discover(root)

        try:
            worktrees = parse_worktree_list(root, raw_output)
        except WorktreeParseError as e:
            logger.warning(f"Could not parse worktrees of {name}: {e}")
            diagnostic = Diagnostic(title=f"Failed to list worktrees of {name}", message=str(e))
            return ProjectNode(name=name, directory=root), diagnostic

        logger.debug(f"Found {len(worktrees)} worktrees for {name}")
        for worktree in worktrees:
            logger.debug(f"  {worktree}")

        children = tuple(ProjectNode.from_worktree(worktree) for worktree in worktrees)
        return ProjectNode(name=name, directory=root, children=children), None

    def resolve(self, projects: Dict[str, str], refresh: bool = False) -> ResolutionResult:
        """Resolve every configured project.

        Args:
            projects: Project name -> root mapping, in config order
            refresh: Ignore the result of a previous identical call even if it
                has not expired yet

        Returns:
            ResolutionResult with nodes in config order
        """
        key = tuple(projects.items())
        if not refresh:
            with self._cache_lock:
                if (
                    self._cached_result is not None
                    and self._cached_key == key
                    and time.monotonic() - self._cached_at < self.cache_ttl
                ):
                    logger.debug("Using cached resolution result")
                    return self._cached_result

        if self.sequential or len(projects) <= 1:
            outcomes = self._resolve_sequential(projects)
        else:
            outcomes = self._resolve_parallel(projects)

        result = ResolutionResult(
            projects=[node for node, _ in outcomes],
            diagnostics=[diagnostic for _, diagnostic in outcomes if diagnostic is not None],
        )

        with self._cache_lock:
            self._cached_key = key
            self._cached_result = result
            self._cached_at = time.monotonic()
        return result

    def _resolve_parallel(self, projects: Dict[str, str]) -> List[Tuple[ProjectNode, Optional[Diagnostic]]]:
        """Resolve projects using ThreadPoolExecutor, keeping config order."""
        max_workers = get_optimal_worker_count(self.workers, task_count=len(projects))
        logger.debug(f"Resolving {len(projects)} projects with {max_workers} workers")

        outcomes = []
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_project = {
                executor.submit(self.resolve_project, name, root): (name, root)
                for name, root in projects.items()
            }

            # Dict order is submission order, which is config order
            for future, (name, root) in future_to_project.items():
                try:
                    outcomes.append(future.result())
                except Exception as e:
                    outcomes.append(self._failed_outcome(name, root, e))

        return outcomes

    def _resolve_sequential(self, projects: Dict[str, str]) -> List[Tuple[ProjectNode, Optional[Diagnostic]]]:
        """Resolve projects one at a time."""
        outcomes = []
        for name, root in projects.items():
            try:
                outcomes.append(self.resolve_project(name, root))
            except Exception as e:
                outcomes.append(self._failed_outcome(name, root, e))
        return outcomes

    @staticmethod
    def _failed_outcome(name: str, root: str, error: Exception) -> Tuple[ProjectNode, Diagnostic]:
        """Childless node for a project whose resolution raised unexpectedly."""
        logger.error(f"Error resolving project {name}: {error}")
        diagnostic = Diagnostic(title=f"Failed to resolve {name}", message=str(error))
        return ProjectNode(name=name, directory=root), diagnostic
