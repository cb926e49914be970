"""Tests for entry formatting and search"""
import pytest

from git_project_finder.formatters import (
    format_directory,
    format_main_marker,
    format_subtitle,
    format_title,
    get_search_keywords,
    matches_query,
)
from git_project_finder.models.project import FlatEntry

BASE = "/home/me/coding/"


@pytest.fixture
def entry():
    return FlatEntry("my_web-app", "/home/me/coding/my-web-app/wt-login", "feature/login", False)


class TestFormatting:
    """Test display formatting."""

    def test_format_title(self):
        assert format_title("my_web-app") == "my web app"

    def test_format_directory_inside_base(self, entry):
        assert format_directory(entry.directory, BASE) == "my-web-app/wt-login"

    def test_format_directory_outside_base(self):
        assert format_directory("/srv/app", BASE) == "/srv/app"

    def test_format_subtitle(self, entry):
        assert format_subtitle(entry, BASE) == "<feature/login>   my-web-app/wt-login"

    def test_format_main_marker(self, entry):
        assert format_main_marker(entry) == ""
        assert format_main_marker(FlatEntry("a", "/a", "main", True)) == "✓"


class TestSearch:
    """Test search keywords and matching."""

    def test_keywords(self, entry):
        assert get_search_keywords(entry, BASE) == [
            "feature/login",
            "my_web-app",
            "my-web-app",
            "wt-login",
        ]

    @pytest.mark.parametrize("query", ["", "login", "LOGIN", "web wt", "feature/lo", "my_web"])
    def test_matching_queries(self, entry, query):
        assert matches_query(entry, query, BASE)

    @pytest.mark.parametrize("query", ["main", "login main", "coding"])
    def test_non_matching_queries(self, entry, query):
        assert not matches_query(entry, query, BASE)
