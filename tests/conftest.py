# tests/conftest.py
"""
Global pytest fixtures for kyopro tests.
"""

import pytest

from kyopro.cli.service_helpers import reset_factory
from kyopro.core import config as core_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Point the config search path at an empty directory and reset global state."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setattr(
        core_config,
        "CONFIG_LOCATIONS",
        [
            config_dir / "kyopro.toml",
            config_dir / "user.toml",
            config_dir / "system.toml",
        ],
    )
    core_config.reset_config()
    reset_factory()
    yield config_dir
    core_config.reset_config()
    reset_factory()


@pytest.fixture
def contest_root(tmp_path):
    """Create a contest project abc300 with one task and two samples."""
    problem_dir = tmp_path / "abc300" / "a"
    tests_dir = problem_dir / "tests"
    tests_dir.mkdir(parents=True)
    (problem_dir / "main.rs").write_text("fn main() {}\n", encoding="utf-8")
    (tests_dir / "sample-1.in").write_text("\ufeff3 4\n", encoding="utf-8")
    (tests_dir / "sample-1.out").write_text("7\n", encoding="utf-8")
    (tests_dir / "sample-2.in").write_text("1 1\n", encoding="utf-8")
    (tests_dir / "sample-2.out").write_text("2\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def mock_shell(mocker):
    """Patch the shell layer so no external tool is ever started."""
    from kyopro.core.shell import BinaryRun

    run_command = mocker.patch("kyopro.core.shell.run_command")
    run_binary = mocker.patch(
        "kyopro.core.shell.run_binary",
        return_value=BinaryRun(stdout="7\n", returncode=0, duration=0.0123),
    )
    return run_command, run_binary
