"""Loading of the projects config file."""

import json
import os
from pathlib import Path
from typing import Optional, Union

from git_project_finder.exceptions import ConfigError
from git_project_finder.logging_config import get_logger
from git_project_finder.models.project import ConfigLoadResult, Diagnostic, ProjectsConfig
from git_project_finder.utils.jsonc import strip_json_comments

logger = get_logger(__name__)

CONFIG_ERROR_TITLE = "Failed to read config file"


def read_config_bytes(config_path: str) -> Optional[bytes]:
    """Read the config file, returning None if it is missing or unreadable."""
    try:
        return Path(config_path).read_bytes()
    except OSError as e:
        logger.debug(f"No config file at {config_path}: {e}")
        return None


def parse_projects_config(config_path: str, text: Union[str, bytes]) -> ProjectsConfig:
    """Parse and validate config file contents.

    Args:
        config_path: Path the text was read from, used in error messages
        text: Raw file contents, as text or UTF-8 bytes (comments and
            trailing commas allowed)

    Returns:
        Validated ProjectsConfig

    Raises:
        ConfigError: If the contents are not UTF-8, not valid JSON or do not
            match the schema
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigError(config_path, f"not valid UTF-8: {e}") from e

    try:
        data = json.loads(strip_json_comments(text, trailing_commas=True))
    except json.JSONDecodeError as e:
        raise ConfigError(config_path, f"invalid JSON: {e}") from e

    try:
        return ProjectsConfig.from_dict(data)
    except ValueError as e:
        raise ConfigError(config_path, str(e)) from e


def load_projects_config(config_path: str) -> ConfigLoadResult:
    """Load the project name -> root mapping from the config file.

    A missing file yields no projects and no diagnostic. An invalid file yields
    no projects and a single diagnostic naming the expected location.

    Args:
        config_path: Location of the config file

    Returns:
        ConfigLoadResult with projects in file order
    """
    raw = read_config_bytes(config_path)
    if not raw:
        return ConfigLoadResult()

    try:
        projects_config = parse_projects_config(config_path, raw)
    except ConfigError as e:
        logger.warning(str(e))
        return ConfigLoadResult(
            diagnostic=Diagnostic(
                title=CONFIG_ERROR_TITLE,
                message=f"Check if a file exists at {config_path}",
            )
        )

    projects = {
        name: os.path.expanduser(root)
        for name, root in projects_config.to_mapping().items()
    }
    logger.debug(f"Loaded {len(projects)} projects from {config_path}")
    return ConfigLoadResult(projects=projects)
