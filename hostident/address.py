"""Resolve host names to raw network addresses."""
from __future__ import annotations

import enum
import ipaddress
import logging
import socket
import struct
from typing import Tuple

from hostident.config import ResolverConfig

logger = logging.getLogger(__name__)

Address = Tuple[int, ...]
"""Four octets for an IPv4 address or eight 16-bit words for IPv6."""


class AddressFamily(enum.Enum):
    """Address family to resolve host names with."""

    IPV4 = 'ipv4'
    """Four one-byte octets."""
    IPV6 = 'ipv6'
    """Eight two-byte words."""

    @classmethod
    def from_value(cls, value: AddressFamily | str) -> AddressFamily:
        """Get the family from a member or its case-insensitive value.

        Raises:
            ValueError: If `value` does not name a family.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f'Unknown address family "{value}". Expected one of: '
                f'{", ".join(f.value for f in cls)}.',
            ) from None

    @property
    def socket_family(self) -> socket.AddressFamily:
        """Matching `socket` module address family."""
        if self is AddressFamily.IPV6:
            return socket.AF_INET6
        return socket.AF_INET


def _to_address(host: str, family: AddressFamily) -> Address:
    # IPv6 hosts may carry a scope id (e.g., fe80::1%eth0)
    packed = ipaddress.ip_address(host.partition('%')[0]).packed
    if family is AddressFamily.IPV6:
        return struct.unpack('!8H', packed)
    return tuple(packed)


def host_name_to_addr(
    name: str,
    family: AddressFamily | str = AddressFamily.IPV4,
    config: ResolverConfig | None = None,
) -> Address | None:
    """Resolve a host name to its first network address.

    Resolution is forced by associating a datagram socket with the host
    on an unused port. No data is sent and the socket is always closed.
    Only the first address is returned if the host has several.

    Example:
        ```python
        >>> host_name_to_addr('localhost')
        (127, 0, 0, 1)
        >>> host_name_to_addr('localhost', 'ipv6')
        (0, 0, 0, 0, 0, 0, 0, 1)
        ```

    Args:
        name: Host name or address literal to resolve.
        family: Address family to resolve with.
        config: Optional resolver config. Only `probe_port` is used.

    Returns:
        Four octets (IPv4) or eight 16-bit words (IPv6), or `None` if the
        name could not be resolved for any reason.

    Raises:
        ValueError: If `family` is not a known address family.
    """
    family = AddressFamily.from_value(family)
    if config is None:
        config = ResolverConfig()

    try:
        with socket.socket(family.socket_family, socket.SOCK_DGRAM) as sock:
            sock.connect((name, config.probe_port))
            # Drop the port (and IPv6 flow info and scope id)
            host = sock.getpeername()[0]
    except (OSError, TypeError, ValueError) as e:
        logger.debug(f'Failed to resolve {name} ({family.value}): {e}')
        return None

    return _to_address(host, family)


def format_address(address: Address) -> str:
    """Format an address as returned by `host_name_to_addr()`.

    Example:
        ```python
        >>> format_address((127, 0, 0, 1))
        '127.0.0.1'
        >>> format_address((0, 0, 0, 0, 0, 0, 0, 1))
        '::1'
        ```

    Raises:
        ValueError: If `address` is not four octets or eight words.
    """
    if len(address) == 4:  # noqa: PLR2004
        return str(ipaddress.IPv4Address(bytes(address)))
    elif len(address) == 8:  # noqa: PLR2004
        return str(ipaddress.IPv6Address(struct.pack('!8H', *address)))
    raise ValueError(
        f'Address must have 4 or 8 parts. Got {len(address)}.',
    )
