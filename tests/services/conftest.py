"""Shared fixtures for service tests."""

from pathlib import Path

import pytest

from kyopro.core.config import get_default_config
from tests.mocks.mock_repository import MockFileRepository

ROOT = Path("/contests")


@pytest.fixture
def mock_repository() -> MockFileRepository:
    """Create a mock file repository for testing."""
    return MockFileRepository()


@pytest.fixture
def config():
    """Default configuration without the cargo-expand install step."""
    config = get_default_config()
    config.set("tools", "install_expand", False)
    return config


@pytest.fixture
def problem_repository(mock_repository) -> MockFileRepository:
    """Mock filesystem holding /contests/abc300/a with two samples."""
    problem_dir = ROOT / "abc300" / "a"
    mock_repository.mkdir(problem_dir)
    mock_repository.write_text(problem_dir / "main.rs", "fn main() {}\n")
    mock_repository.write_text(problem_dir / "tests" / "sample-1.in", "\ufeff3 4\n")
    mock_repository.write_text(problem_dir / "tests" / "sample-1.out", "7\n")
    mock_repository.write_text(problem_dir / "tests" / "sample-2.in", "1 1\n")
    mock_repository.write_text(problem_dir / "tests" / "sample-2.out", "2\n")
    return mock_repository
