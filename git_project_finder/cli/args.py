"""Command-line argument parsing for git-project-finder."""

import argparse
from git_project_finder.__version__ import __version__
from git_project_finder.constants import CONFIG_PATH_ENV_VAR, DEFAULT_BASE_PATH


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="List configured projects and their git worktrees",
        epilog='Config file format: {"projects": {"<name>": {"root": "<path>"}}}. '
        f"Comments and trailing commas are allowed. Override the location with --config or {CONFIG_PATH_ENV_VAR}.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-project-finder {__version__}")
    parser.add_argument("--config", metavar="PATH", help="Path to the projects config file")
    parser.add_argument(
        "--base-path",
        metavar="PATH",
        default=DEFAULT_BASE_PATH,
        help=f"Prefix removed from displayed directories (default: {DEFAULT_BASE_PATH})",
    )
    parser.add_argument("--search", metavar="QUERY", help="Only show entries matching QUERY")
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--refresh", action="store_true", help="Bypass the in-memory cache")
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel git processes (default: auto-detect based on CPU and threading mode)",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Resolve projects one at a time",
    )

    return parser.parse_args(argv)
