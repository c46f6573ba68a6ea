"""Login command -- store a Movey API token for later uploads.

Provides ``move movey-login``: the user is pointed at the registry's token
settings page, pastes a token, and the token is saved to
``<move home>/credential.toml``.

Typical workflow::

    move movey-login
    Please paste the API Token found on https://movey.net/settings/tokens below
    <paste token, press Enter>
    Token for Movey saved.
"""

from __future__ import annotations

from typing import Optional

import typer

from movecli.auth.credential_store import (
    credential_path,
    permissions_supported,
    save_credential,
)
from movecli.auth.prompt import read_token
from movecli.config import get_registry_url, resolve_home
from movecli.exceptions import MoveCliError
from movecli.models import TestMode
from movecli.output import debug, error, info, print_data, success, warning

SAVED_MESSAGE = "Token for Movey saved."


def prompt_message(registry_url: str) -> str:
    """Return the line asking the user to paste a token from *registry_url*."""
    return f"Please paste the API Token found on {registry_url}/settings/tokens below"


def handle_login(test_path: Optional[str] = None) -> None:
    """Run the login flow: prompt, read the token, save it, confirm.

    Args:
        test_path: When not ``None``, run in test mode: the Move home is
            ``$TEST_MOVE_HOME`` with this suffix appended.

    Raises:
        MoveCliError: From any step; nothing is caught or retried here.
        RuntimeError: If test mode is requested without ``$TEST_MOVE_HOME``.
    """
    registry_url = get_registry_url()
    debug(f"Registry: {registry_url}")
    print_data(prompt_message(registry_url))
    token = read_token()

    if test_path is not None:
        home = resolve_home(TestMode(test_path=test_path))
        info(f"Test mode: Move home is {home}")
    else:
        home = resolve_home()

    save_credential(token, home)
    path = credential_path(home)
    if not permissions_supported():
        warning(f"Permissions of {path} could not be restricted on this platform.")
    success(f"Credential written to {path}")
    print_data(SAVED_MESSAGE)


def login_command(
    test_path: Optional[str] = typer.Option(
        None,
        "--test-path",
        hidden=True,
        help="Test only: suffix appended to $TEST_MOVE_HOME.",
    ),
) -> None:
    """Store a Movey API token in the Move home directory.

    The token is read from standard input and merged into
    ``credential.toml`` under ``[registry]``; other settings in the file
    are kept. The file is made readable by its owner only.

    Raises:
        typer.Exit: With the failing step's exit code, after printing the
            error on stderr.

    Example::

        move movey-login
        echo "$MOVEY_TOKEN" | move movey-login
    """
    try:
        handle_login(test_path)
    except MoveCliError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
