"""Home-directory resolution and registry selection.

All environment lookups happen here, once, at the CLI boundary. The
credential store itself only ever receives a resolved :class:`~pathlib.Path`.

* **Home directory** -- :func:`resolve_home` picks exactly one of
  ``$TEST_MOVE_HOME`` (+ test suffix), ``$MOVE_HOME`` or ``~/.move`` and
  creates it.
* **Registry URL** -- :func:`get_registry_url` returns the production Movey
  site unless ``$MOVEY_STAGING`` asks for the staging deployment.
* **Data directory** -- :func:`get_data_dir` holds crash logs (XDG on
  Linux/BSD, ``~/.movecli/`` elsewhere).
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Optional

from movecli.exceptions import ConfigError
from movecli.models import TestMode

_APP_NAME = "movecli"

MOVE_HOME_ENV = "MOVE_HOME"
TEST_MOVE_HOME_ENV = "TEST_MOVE_HOME"
MOVEY_STAGING_ENV = "MOVEY_STAGING"

DEFAULT_MOVE_HOME_DIRNAME = ".move"

PRODUCTION_REGISTRY_URL = "https://movey.net"
STAGING_REGISTRY_URL = "https://movey-app-staging.herokuapp.com"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


# --- Move home ---


def resolve_home(test_mode: Optional[TestMode] = None) -> Path:
    """Return the Move home directory, creating it if necessary.

    Resolution (exactly one branch is taken):

    1. *test_mode* given: ``$TEST_MOVE_HOME`` with ``test_mode.test_path``
       joined on as a child path when non-empty. Leading slashes of the
       suffix are dropped first, so ``/x`` and ``x`` both give
       ``$TEST_MOVE_HOME/x``; the suffix is never glued onto the last
       component (``x`` does not give ``$TEST_MOVE_HOMEx``).
    2. ``$MOVE_HOME`` when set.
    3. ``~/.move``.

    Args:
        test_mode: Sandbox override used by the test suite.

    Returns:
        Path to the directory that holds ``credential.toml`` (guaranteed to
        exist).

    Raises:
        RuntimeError: If *test_mode* is given but ``$TEST_MOVE_HOME`` is not
            set. This is a misconfigured caller, not a user error.
        ConfigError: If the directory cannot be created.
    """
    if test_mode is not None:
        base = os.environ.get(TEST_MOVE_HOME_ENV)
        if not base:
            raise RuntimeError(
                f"{TEST_MOVE_HOME_ENV} must be set when --test-path is used"
            )
        path = Path(base)
        if test_mode.test_path:
            path = path / test_mode.test_path.lstrip("/")
    else:
        env_value = os.environ.get(MOVE_HOME_ENV, "")
        if env_value:
            path = Path(env_value)
        else:
            path = Path.home() / DEFAULT_MOVE_HOME_DIRNAME

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(
            f"Could not create directory {path}: {exc.strerror or exc}"
        ) from exc
    return path


# --- Registry ---


def is_staging() -> bool:
    """Return True if ``$MOVEY_STAGING`` holds a truthy value."""
    return os.environ.get(MOVEY_STAGING_ENV, "").strip().lower() in _TRUTHY


def get_registry_url() -> str:
    """Return the base URL of the Movey registry website (no trailing slash)."""
    if is_staging():
        return STAGING_REGISTRY_URL
    return PRODUCTION_REGISTRY_URL


# --- Crash logs ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/movecli/`` (default ``~/.local/share/movecli/``).
    On macOS/Windows: ``~/.movecli/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path
