"""Pytest fixtures for git-project-finder tests"""
import json
import logging
import os
import tempfile
from pathlib import Path
import pytest
import git


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore root logger handlers replaced by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def sample_porcelain():
    """Discovery output for a project rooted at /r with one linked worktree."""
    return (
        "worktree /r\n"
        "HEAD 1111111111111111111111111111111111111111\n"
        "branch refs/heads/main\n"
        "\n"
        "worktree /r/wt2\n"
        "HEAD 2222222222222222222222222222222222222222\n"
        "branch refs/heads/feature\n"
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # git reports resolved paths, so compare against the resolved directory
        yield Path(os.path.realpath(tmpdir))


@pytest.fixture
def mock_config(temp_dir):
    """Create a configuration dictionary pointing at a temporary config file."""
    return {
        'config_path': str(temp_dir / "projects.jsonc"),
        'base_path': str(temp_dir) + os.sep,
        'verbose': False,
        'debug': False,
        'refresh': False,
        'sequential': True,
        'workers': None,
    }


@pytest.fixture
def write_config(mock_config):
    """Write the projects config file used by mock_config."""
    def _write(content):
        path = Path(mock_config['config_path'])
        if isinstance(content, bytes):
            path.write_bytes(content)
            return mock_config['config_path']
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return mock_config['config_path']

    return _write


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_worktrees(git_repo, temp_dir):
    """Create a repository with a branch worktree and a detached worktree."""
    feature_path = temp_dir / "test_repo-feature"
    detached_path = temp_dir / "test_repo-detached"

    git_repo.git.worktree('add', '-b', 'feature/worktree', str(feature_path))
    git_repo.git.worktree('add', '--detach', str(detached_path))
    git_repo.git.worktree('lock', '--reason', 'on removable drive', str(detached_path))

    yield git_repo

    git_repo.git.worktree('unlock', str(detached_path))
