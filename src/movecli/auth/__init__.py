"""Movey registry credentials.

- :func:`read_token` -- read the pasted API token from standard input.
- :func:`save_credential` -- merge the token into ``credential.toml`` and
  restrict the file to its owner.
- :func:`load_token` -- read the stored token back.
"""

from movecli.auth.credential_store import (
    credential_path,
    load_token,
    permissions_supported,
    save_credential,
    set_permissions,
)
from movecli.auth.prompt import read_token

__all__ = [
    "credential_path",
    "load_token",
    "permissions_supported",
    "read_token",
    "save_credential",
    "set_permissions",
]
