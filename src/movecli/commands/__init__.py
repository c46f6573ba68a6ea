"""Built-in CLI sub-commands for movecli.

* :mod:`~movecli.commands.login` -- store a Movey API token
  (``move movey-login``).

Each module exports plain callback functions registered directly on the
root app in :func:`movecli.app.main`.
"""
