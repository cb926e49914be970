"""Tests for runtime configuration"""
import os
import pytest

from git_project_finder.config import Config
from git_project_finder.constants import CONFIG_PATH_ENV_VAR, DEFAULT_CONFIG_PATH


class TestConfig:
    """Test Config defaults and validation."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
        config = Config()
        assert config.config_path == DEFAULT_CONFIG_PATH
        assert config.workers is None
        assert config.sequential is False

    def test_env_var_overrides_config_path(self, monkeypatch, temp_dir):
        path = str(temp_dir / "custom.jsonc")
        monkeypatch.setenv(CONFIG_PATH_ENV_VAR, path)
        assert Config().config_path == path

    def test_paths_expand_home(self):
        config = Config(config_path="~/projects.jsonc", base_path="~/src/")
        home = os.path.expanduser("~")
        assert config.config_path == os.path.join(home, "projects.jsonc")
        assert config.base_path == os.path.join(home, "src") + "/"

    def test_invalid_workers(self):
        with pytest.raises(ValueError, match="workers must be positive"):
            Config(workers=0)

    def test_empty_config_path(self):
        with pytest.raises(ValueError, match="config_path cannot be empty"):
            Config(config_path="  ")

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"sequential": True, "colour": "blue"})
        assert config.sequential is True
        assert config.to_dict()["sequential"] is True
        assert config.get("colour", "none") == "none"
