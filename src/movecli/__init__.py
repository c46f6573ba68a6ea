"""movecli -- Movey registry login for the Move command line.

This package implements the ``move movey-login`` flow: it prompts for an
API token on standard input, merges it into the per-user
``credential.toml`` file, and restricts the file to its owner.

Typical workflow::

    move movey-login            # paste the token from the registry website

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the package.
    config: Home-directory resolution and registry URL selection.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
