"""Shared test fixtures for movecli.

Provides fixtures for isolating the Move home directory and the process
environment, resetting global output and logging state, and running CLI
commands. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from movecli.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager and the ``movecli`` logger after every test.

    Both cache a reference to sys.stderr when a CLI invocation starts.
    Once Typer's CliRunner closes its captured streams those references are
    stale, so the next test must start from scratch.
    """
    yield
    reset_output()
    logger = logging.getLogger("movecli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate every location movecli reads from the environment.

    Points HOME and XDG_DATA_HOME into tmp_path, clears MOVE_HOME,
    TEST_MOVE_HOME and MOVEY_STAGING, and changes the working directory to
    tmp_path.

    Returns:
        The tmp_path root directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in ["MOVE_HOME", "TEST_MOVE_HOME", "MOVEY_STAGING"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def move_home(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Set MOVE_HOME to a fresh (not yet created) directory and return it."""
    path = isolated_env / "move_home"
    monkeypatch.setenv("MOVE_HOME", str(path))
    return path


@pytest.fixture
def sandbox_home(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Set TEST_MOVE_HOME to a base directory for ``--test-path`` runs."""
    path = isolated_env / "test_move_home"
    monkeypatch.setenv("TEST_MOVE_HOME", str(path))
    return path


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner.

    Returns a CliRunner instance that captures stdout/stderr and feeds
    ``input=`` to standard input.
    """
    from typer.testing import CliRunner

    return CliRunner()
