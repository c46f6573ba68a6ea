"""Pydantic models shared across movecli.

* :class:`TestMode` -- sandbox override for the Move home directory, built
  only when the hidden ``--test-path`` flag is passed.
* :class:`RegistrySection` -- the ``[registry]`` table of
  ``credential.toml`` as seen when reading the token back.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TestMode(BaseModel):
    """Test-only override of the Move home directory.

    The home directory becomes ``$TEST_MOVE_HOME`` with :attr:`test_path`
    appended, so that each test can work in its own directory.

    Example::

        TestMode(test_path="/save_credential_works")
    """

    # Keep pytest from collecting this model as a test class.
    __test__ = False

    test_path: str = Field(
        default="",
        description="Suffix appended to $TEST_MOVE_HOME (empty = use it as-is)",
    )


class RegistrySection(BaseModel):
    """The ``[registry]`` table of the credential document.

    Only ``token`` is interpreted. Any other keys (``version`` and so on) are
    kept in ``model_extra`` and never rewritten by movecli.
    """

    model_config = ConfigDict(extra="allow")

    token: str = Field(description="Movey API token")
