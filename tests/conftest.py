"""
Pytest configuration and shared fixtures for dockerhooks tests.

Provides an isolated process environment for every test and a fake docker
executable for the tests that spawn real subprocesses.
"""

import pytest

from dockerhooks.core.docker import DOCKER_CLI_ENVS
from dockerhooks.core.errors import set_error_handler
from tests.fixtures.utils import HOOK_ENV_VARS, install_fake_docker, prepend_path


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_hook_env(monkeypatch):
    """Remove every variable the hooks read so tests start from a known state."""
    for name in sorted(DOCKER_CLI_ENVS) + HOOK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    set_error_handler(None)


@pytest.fixture
def workspace(monkeypatch, tmp_path):
    """Set GITHUB_WORKSPACE to a temporary directory."""
    monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path))
    return tmp_path


# ============================================================================
# Docker Fixtures
# ============================================================================

@pytest.fixture
def fake_docker(monkeypatch, tmp_path):
    """Put a fake docker executable first on PATH."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = install_fake_docker(bin_dir)
    monkeypatch.setenv("PATH", prepend_path(bin_dir))
    return script
