"""Registry credential store backed by ``<move home>/credential.toml``.

The file is a TOML document whose ``[registry]`` table holds the Movey API
token::

    [registry]
    token = "eb8xZkyr78FNL528j7q39zcdS6mxjBXt"
    version = "0.0.0"

:func:`save_credential` performs a read-modify-write of the whole document:
only ``registry.token`` is inserted or replaced, everything else (other keys
of ``[registry]``, other tables, comments) is written back as it was read.
The file is then restricted to ``0o600``.

The update is not locked and the file is rewritten in place. Two
invocations racing on the same file are last-writer-wins: an update that
lands between another process's read and write is lost.

See Also:
    :func:`movecli.config.resolve_home` -- produces the *home* argument.
"""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from pathlib import Path

import tomlkit
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError
from tomlkit.toml_document import TOMLDocument

from movecli.exceptions import (
    CredentialError,
    CredentialParseError,
    CredentialReadError,
    CredentialWriteError,
)
from movecli.models import RegistrySection

logger = logging.getLogger(__name__)

CREDENTIAL_FILENAME = "credential.toml"
REGISTRY_SECTION = "registry"
TOKEN_KEY = "token"
CREDENTIAL_FILE_MODE = 0o600

BAD_CREDENTIAL_MESSAGE = (
    "There seems to be an error with your Movey credential. "
    "Please run `move login` and follow the instructions."
)


def credential_path(home: Path) -> Path:
    """Return the path of the credential file inside *home*."""
    return home / CREDENTIAL_FILENAME


def save_credential(token: str, home: Path) -> None:
    """Store *token* as ``registry.token`` in ``<home>/credential.toml``.

    The file is created empty if missing, parsed, updated, rewritten in full
    and chmod-ed to ``0o600``. No step is retried.

    Args:
        token: The API token to store.
        home: The resolved Move home directory (must exist).

    Raises:
        CredentialWriteError: If the file cannot be created, written, or
            have its permissions set.
        CredentialReadError: If the file cannot be read (e.g. permission
            denied).
        CredentialParseError: If the file is not valid TOML or
            ``registry`` is not a table.
    """
    path = credential_path(home)
    if not path.exists():
        logger.debug("Creating empty credential file %s", path)
        try:
            path.touch()
        except OSError as exc:
            raise CredentialWriteError(
                f"Error creating credential file: {_os_error_text(exc)}"
            ) from exc

    text = _read_text(path)
    document = _parse(text)
    _merge_token(document, token)
    _write_text(path, tomlkit.dumps(document))
    set_permissions(path, CREDENTIAL_FILE_MODE)
    logger.debug("Saved registry token to %s", path)


def load_token(home: Path) -> str:
    """Return the stored registry token.

    Unlike :func:`save_credential` this never creates anything: a missing
    file is an error.

    Args:
        home: The resolved Move home directory.

    Raises:
        CredentialError: If the file is missing, unreadable, or malformed,
            or holds no usable token.
    """
    path = credential_path(home)
    if not path.is_file():
        logger.debug("No credential file at %s", path)
        raise CredentialError(BAD_CREDENTIAL_MESSAGE)
    try:
        document = _parse(_read_text(path))
        section = RegistrySection.model_validate(
            document.unwrap().get(REGISTRY_SECTION)
        )
    except (CredentialError, ValidationError) as exc:
        logger.debug("Unusable credential file %s: %s", path, exc)
        raise CredentialError(BAD_CREDENTIAL_MESSAGE) from exc
    if not section.token:
        raise CredentialError(BAD_CREDENTIAL_MESSAGE)
    return section.token


def permissions_supported() -> bool:
    """Return True if POSIX permission bits can restrict the credential file."""
    return os.name == "posix"


def set_permissions(path: Path, mode: int) -> None:
    """Set the permission bits of *path*. No-op on non-POSIX platforms."""
    if not permissions_supported():
        return
    try:
        os.chmod(path, mode)
    except OSError as exc:
        raise CredentialWriteError(
            f"Error setting permissions on credential file: {_os_error_text(exc)}"
        ) from exc


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CredentialReadError(
            f"Error reading input: {_os_error_text(exc)}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise CredentialReadError(f"Error reading input: {exc}") from exc


def _parse(text: str) -> TOMLDocument:
    """Parse *text* as TOML. An empty string is an empty document."""
    try:
        document = tomlkit.parse(text)
    except TOMLKitError as exc:
        raise CredentialParseError(f"could not parse input as TOML: {exc}") from exc
    registry = document.get(REGISTRY_SECTION)
    if registry is not None and not isinstance(registry, MutableMapping):
        raise CredentialParseError(
            f"could not parse input as TOML: '{REGISTRY_SECTION}' is not a table"
        )
    return document


def _merge_token(document: TOMLDocument, token: str) -> None:
    """Set ``registry.token`` in place, creating ``[registry]`` if absent."""
    registry = document.get(REGISTRY_SECTION)
    if registry is None:
        table = tomlkit.table()
        table.add(TOKEN_KEY, token)
        document.add(REGISTRY_SECTION, table)
    else:
        registry[TOKEN_KEY] = token


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CredentialWriteError(
            f"Error writing credential file: {_os_error_text(exc)}"
        ) from exc


def _os_error_text(exc: OSError) -> str:
    """Return the OS message of *exc* (``Permission denied``) without the errno/path decoration."""
    return exc.strerror or str(exc)
