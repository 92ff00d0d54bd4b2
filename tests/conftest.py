"""Shared fixtures for the sequential thinking tests."""

import pytest

from sequential_thinking.config import ServerSettings
from sequential_thinking.handler import SequentialThinkingHandler


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the developer's environment and .env file."""
    return ServerSettings(_env_file=None, app_log_dir=str(tmp_path / "logs"))


@pytest.fixture
def handler():
    return SequentialThinkingHandler()
