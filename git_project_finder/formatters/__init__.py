"""Formatting utilities for git-project-finder.

- project: Titles, subtitles and search keywords for flat entries
"""

from .project import (
    format_title,
    format_directory,
    format_subtitle,
    format_main_marker,
    get_search_keywords,
    matches_query,
)

__all__ = [
    "format_title",
    "format_directory",
    "format_subtitle",
    "format_main_marker",
    "get_search_keywords",
    "matches_query",
]
