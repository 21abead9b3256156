"""Host name helpers."""
from __future__ import annotations

import re

from hostident.utils.environment import system_name

# A character that starts the string or follows a run of hyphens.
_NICK_CHAR_PATTERN = re.compile(r'(?:^|-+)([^-])')


def host_name() -> str:
    """Return the short name of this host.

    The domain suffix of the system name, if any, is dropped and the result
    is lower-cased.

    Example:
        ```python
        >>> socket.gethostname()
        'Build-Server.example.com'
        >>> host_name()
        'build-server'
        ```
    """
    name, _, _ = system_name().partition('.')
    return name.lower()


def abbreviate_hostnick(name: str) -> str:
    """Abbreviate a host name into a short nickname.

    The domain suffix is dropped first. If what remains is hyphenated, the
    nickname is built from the first character and the character following
    each run of hyphens. Otherwise the short name is returned unchanged.

    Example:
        ```python
        >>> abbreviate_hostnick('old-mac-donald.example.com')
        'omd'
        >>> abbreviate_hostnick('single')
        'single'
        ```

    Args:
        name: Host name, optionally fully-qualified.

    Returns:
        The nickname.
    """
    name, _, _ = name.partition('.')
    if '-' not in name:
        return name
    return ''.join(_NICK_CHAR_PATTERN.findall(name))
