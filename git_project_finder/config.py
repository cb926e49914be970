"""Configuration handling for git-project-finder"""

import os
from dataclasses import dataclass, field
from typing import Optional

from git_project_finder.constants import (
    CONFIG_PATH_ENV_VAR,
    DEFAULT_BASE_PATH,
    DEFAULT_CONFIG_PATH,
)


def default_config_path() -> str:
    """Config file location, honouring the environment override."""
    return os.environ.get(CONFIG_PATH_ENV_VAR) or DEFAULT_CONFIG_PATH


@dataclass
class Config:
    """Runtime configuration for git-project-finder with validation."""

    # Locations
    config_path: str = field(default_factory=default_config_path)
    base_path: str = DEFAULT_BASE_PATH

    # Output
    search: Optional[str] = None
    output_json: bool = False

    # Execution modes
    verbose: bool = False
    debug: bool = False
    refresh: bool = False  # Bypass the in-memory resolution cache
    sequential: bool = False  # Resolve projects one after another
    workers: Optional[int] = None  # Number of parallel workers (None = auto-detect)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config_path()
        self._validate_base_path()
        self._validate_workers()

    def _validate_config_path(self):
        """Validate config_path is not empty and expand ~."""
        if not self.config_path or not self.config_path.strip():
            raise ValueError("config_path cannot be empty")
        self.config_path = os.path.expanduser(self.config_path.strip())

    def _validate_base_path(self):
        """Validate base_path is not empty and expand ~."""
        if not self.base_path or not self.base_path.strip():
            raise ValueError("base_path cannot be empty")
        self.base_path = os.path.expanduser(self.base_path.strip())

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "config_path": self.config_path,
            "base_path": self.base_path,
            "search": self.search,
            "output_json": self.output_json,
            "verbose": self.verbose,
            "debug": self.debug,
            "refresh": self.refresh,
            "sequential": self.sequential,
            "workers": self.workers,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "config_path",
            "base_path",
            "search",
            "output_json",
            "verbose",
            "debug",
            "refresh",
            "sequential",
            "workers",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
