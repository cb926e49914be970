"""Flattening of resolved project trees into display rows."""

from typing import Iterable, List

from git_project_finder.models.project import FlatEntry, ProjectNode


def flatten_project(project: ProjectNode) -> List[FlatEntry]:
    """One entry per worktree of a project.

    The main worktree flag is derived again from the node directories, not
    taken from the parsed worktree record.
    """
    return [
        FlatEntry(
            display_name=project.name,
            directory=child.directory,
            branch=child.branch,
            is_main_worktree=child.directory == project.directory,
        )
        for child in project.children
    ]


def flatten_projects(projects: Iterable[ProjectNode]) -> List[FlatEntry]:
    """Concatenate the entries of all projects, in project then worktree order.

    Projects without worktrees contribute no entries.
    """
    entries: List[FlatEntry] = []
    for project in projects:
        entries.extend(flatten_project(project))
    return entries
