"""Exception hierarchy for movecli.

All exceptions inherit from :class:`MoveCliError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`movecli.exit_codes`.
Commands catch ``MoveCliError``, print its message on stderr and exit with
the appropriate code, while unexpected exceptions produce a crash log and
exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    MoveCliError (exit 1)
    +-- InputError                (exit 3)
    +-- ConfigError               (exit 1)
    +-- CredentialError           (exit 4)
        +-- CredentialReadError   (exit 4)
        +-- CredentialWriteError  (exit 4)
        +-- CredentialParseError  (exit 7)
"""

from movecli.exit_codes import (
    EXIT_CREDENTIAL_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INPUT_ERROR,
    EXIT_PARSE_ERROR,
)


class MoveCliError(Exception):
    """Base exception for all movecli errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`movecli.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InputError(MoveCliError):
    """Raised when the token cannot be read from standard input."""

    exit_code = EXIT_INPUT_ERROR


class ConfigError(MoveCliError):
    """Raised when the Move home directory cannot be prepared."""

    exit_code = EXIT_GENERIC_FAILURE


class CredentialError(MoveCliError):
    """Raised for problems with the stored registry credential."""

    exit_code = EXIT_CREDENTIAL_ERROR


class CredentialReadError(CredentialError):
    """Raised when the credential file exists but cannot be read."""


class CredentialWriteError(CredentialError):
    """Raised when the credential file cannot be created, written, or chmod-ed."""


class CredentialParseError(CredentialError):
    """Raised when the credential file is not a valid TOML document."""

    exit_code = EXIT_PARSE_ERROR
