"""Utilities related to the current execution environment."""
from __future__ import annotations

import os
import socket


def home_dir() -> str:
    """Return the absolute path of the directory holding the config file.

    Resolution order:

    1. `$HOSTIDENT_HOME`, with `~` expanded.
    2. `$XDG_DATA_HOME/hostident`.
    3. `~/.local/share/hostident`.

    Empty variables are treated as unset. The directory is not created.
    """
    path = os.environ.get('HOSTIDENT_HOME')
    if path:
        return os.path.abspath(os.path.expanduser(path))

    prefix = os.environ.get('XDG_DATA_HOME') or '~/.local/share'
    return os.path.abspath(
        os.path.join(os.path.expanduser(prefix), 'hostident'),
    )


def system_name() -> str:
    """Return the host name as reported by the operating system.

    This may or may not be fully-qualified depending on how the host
    is configured.
    """
    return socket.gethostname()
