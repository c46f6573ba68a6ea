"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~movecli.exceptions.MoveCliError` subclass.
Shell wrappers and test harnesses can inspect the exit code to tell a bad
token prompt from a broken credential file without parsing stderr.

Example::

    $ move movey-login < /dev/null
    $ echo $?
    3   # EXIT_INPUT_ERROR -- no token could be read
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_INPUT_ERROR = 3
"""The token could not be read from standard input."""

EXIT_CREDENTIAL_ERROR = 4
"""The credential file could not be created, read, or written."""

EXIT_PARSE_ERROR = 7
"""The credential file is not valid TOML."""

EXIT_CANCELLED = 130
"""The user interrupted the command (Ctrl-C)."""
