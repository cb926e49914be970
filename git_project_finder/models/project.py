"""Project tree and flat list models."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from git_project_finder.models.worktree import WorktreeRecord


@dataclass(frozen=True)
class Diagnostic:
    """A non-blocking notice to show to the user."""

    title: str
    message: str

    def __str__(self) -> str:
        return f"{self.title}: {self.message}"


@dataclass
class ProjectConfigEntry:
    """One project declared in the config file."""

    name: str
    root: str

    def __post_init__(self):
        """Validate the entry after initialization."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("project name must be a non-empty string")
        if not isinstance(self.root, str):
            raise ValueError(f"projects.{self.name}.root must be a string")


@dataclass
class ProjectsConfig:
    """Schema of the projects config file: {"projects": {name: {"root": path}}}."""

    projects: List[ProjectConfigEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data) -> "ProjectsConfig":
        """Validate parsed JSON and build the config.

        Raises:
            ValueError: If the data does not match the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError("config must be an object")
        if "projects" not in data:
            raise ValueError("config is missing 'projects'")

        raw_projects = data["projects"]
        if not isinstance(raw_projects, dict):
            raise ValueError("'projects' must be an object")

        entries = []
        for name, project in raw_projects.items():
            if not isinstance(project, dict) or "root" not in project:
                raise ValueError(f"projects.{name} must be an object with a 'root'")
            entries.append(ProjectConfigEntry(name=name, root=project["root"]))
        return cls(projects=entries)

    def to_mapping(self) -> Dict[str, str]:
        """Project name -> root, in file order."""
        return {entry.name: entry.root for entry in self.projects}


@dataclass(frozen=True)
class ConfigLoadResult:
    """Outcome of loading the config file."""

    projects: Dict[str, str] = field(default_factory=dict)
    diagnostic: Optional[Diagnostic] = None


@dataclass(frozen=True)
class ProjectNode:
    """A resolved project, or one of its worktrees when used as a child."""

    name: str
    directory: str
    branch: Optional[str] = None
    children: Tuple["ProjectNode", ...] = ()
    worktree: Optional[WorktreeRecord] = None  # Set on worktree children only

    @classmethod
    def from_worktree(cls, worktree: WorktreeRecord) -> "ProjectNode":
        """Build a child node named after the worktree's branch."""
        label = worktree.display_branch
        return cls(name=label, directory=worktree.directory, branch=label, worktree=worktree)


@dataclass(frozen=True)
class ResolutionResult:
    """Resolved project nodes plus any per-project notices."""

    projects: List[ProjectNode] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass(frozen=True)
class FlatEntry:
    """One openable location shown to the user."""

    display_name: str
    directory: str
    branch: Optional[str]
    is_main_worktree: bool

    def to_dict(self) -> dict:
        """Serialize to the produced list contract."""
        return {
            "displayName": self.display_name,
            "directory": self.directory,
            "branch": self.branch,
            "isMainWorktree": self.is_main_worktree,
        }


@dataclass(frozen=True)
class FinderResult:
    """Flat entries plus diagnostics collected along the way."""

    entries: List[FlatEntry] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
