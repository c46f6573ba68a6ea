"""Token prompt -- read the pasted API token from standard input.

The token is read line by line and echoed like any other input, so it can
also be piped in (``echo $TOKEN | move movey-login``).
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from movecli.exceptions import InputError
from movecli.output import print_data

RETRY_MESSAGE = "Invalid API Token. Try again!"


def read_token(stream: Optional[TextIO] = None) -> str:
    """Read one non-empty line from *stream* (default: ``sys.stdin``).

    One trailing ``\\n`` and then one trailing ``\\r`` are stripped. Empty
    lines print :data:`RETRY_MESSAGE` and are read again. A last line with
    no terminator is accepted as-is.

    Args:
        stream: Text stream to read from. Resolved at call time so that a
            replaced ``sys.stdin`` is honoured.

    Returns:
        The token, never empty.

    Raises:
        InputError: If reading fails, or input ends before a token was given.
    """
    if stream is None:
        stream = sys.stdin
    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Error reading file: {exc}") from exc
        if not line:
            raise InputError("Error reading file: unexpected end of input")

        token = line.removesuffix("\n").removesuffix("\r")
        if token:
            return token
        print_data(RETRY_MESSAGE)
