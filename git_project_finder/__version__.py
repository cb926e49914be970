"""Version information for git-project-finder."""

try:
    from git_project_finder._version import __version__
except ImportError:
    # Fallback for development without tags or when running from source
    __version__ = "0.0.0+unknown"
