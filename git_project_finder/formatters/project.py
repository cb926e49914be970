"""Project entry formatting and search utilities."""

import re
from typing import List

from git_project_finder.constants import SYMBOL_LINKED_WORKTREE, SYMBOL_MAIN_WORKTREE
from git_project_finder.models.project import FlatEntry


def format_title(name: str) -> str:
    """
    Format a project name for display.

    Args:
        name: Project name from the config file

    Returns:
        Name with underscores and dashes replaced by spaces
    """
    return re.sub(r"[_-]", " ", name)


def format_directory(directory: str, base_path: str) -> str:
    """
    Shorten a directory by removing the base projects path.

    Args:
        directory: Absolute worktree directory
        base_path: Common prefix of project directories

    Returns:
        Directory relative to base_path, or unchanged if outside it
    """
    return directory.replace(base_path, "", 1) if base_path else directory


def format_subtitle(entry: FlatEntry, base_path: str) -> str:
    """
    Format the branch and short directory of an entry.

    Args:
        entry: Flat entry to format
        base_path: Common prefix of project directories

    Returns:
        String like "<main>   project/worktree"
    """
    return f"<{entry.branch}>   {format_directory(entry.directory, base_path)}"


def format_main_marker(entry: FlatEntry) -> str:
    """
    Format the main worktree column of an entry.

    Args:
        entry: Flat entry to format

    Returns:
        Check mark for the main worktree, empty string for linked worktrees
    """
    return SYMBOL_MAIN_WORKTREE if entry.is_main_worktree else SYMBOL_LINKED_WORKTREE


def get_search_keywords(entry: FlatEntry, base_path: str) -> List[str]:
    """
    Get the keywords an entry can be found by.

    Args:
        entry: Flat entry
        base_path: Common prefix of project directories

    Returns:
        Branch, project name and each segment of the short directory
    """
    segments = format_directory(entry.directory, base_path).split("/")
    return [entry.branch or "", entry.display_name, *segments]


def matches_query(entry: FlatEntry, query: str, base_path: str) -> bool:
    """
    Check whether an entry matches a search query.

    Every whitespace-separated term of the query must be a case-insensitive
    substring of at least one keyword. An empty query matches everything.
    """
    keywords = [keyword.lower() for keyword in get_search_keywords(entry, base_path) if keyword]
    return all(
        any(term in keyword for keyword in keywords)
        for term in query.lower().split()
    )
