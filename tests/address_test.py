from __future__ import annotations

import socket
from typing import Any
from unittest import mock

import pytest

from hostident.address import AddressFamily
from hostident.address import format_address
from hostident.address import host_name_to_addr
from hostident.config import ResolverConfig


def _mock_socket(peername: tuple[Any, ...]) -> mock.MagicMock:
    mocked = mock.MagicMock()
    sock = mocked.return_value.__enter__.return_value
    sock.getpeername.return_value = peername
    return mocked


@pytest.mark.parametrize(
    ('value', 'expected'),
    (
        ('ipv4', AddressFamily.IPV4),
        ('IPv6', AddressFamily.IPV6),
        (AddressFamily.IPV6, AddressFamily.IPV6),
    ),
)
def test_address_family_from_value(
    value: AddressFamily | str,
    expected: AddressFamily,
) -> None:
    assert AddressFamily.from_value(value) is expected


def test_address_family_from_bad_value() -> None:
    with pytest.raises(ValueError, match='Unknown address family'):
        AddressFamily.from_value('ipx')


def test_address_family_socket_family() -> None:
    assert AddressFamily.IPV4.socket_family == socket.AF_INET
    assert AddressFamily.IPV6.socket_family == socket.AF_INET6


def test_host_name_to_addr_loopback() -> None:
    address = host_name_to_addr('127.0.0.1')
    assert address == (127, 0, 0, 1)


def test_host_name_to_addr_localhost_ipv6() -> None:
    address = host_name_to_addr('::1', 'ipv6')
    if address is None:  # pragma: no cover
        pytest.skip('IPv6 loopback is not available on this host.')
    assert address == (0, 0, 0, 0, 0, 0, 0, 1)


def test_host_name_to_addr_ipv4() -> None:
    mocked = _mock_socket(('192.0.2.17', 1))
    with mock.patch('socket.socket', mocked):
        address = host_name_to_addr('foo.example.com', AddressFamily.IPV4)

    assert address == (192, 0, 2, 17)
    assert len(address) == 4
    mocked.assert_called_once_with(socket.AF_INET, socket.SOCK_DGRAM)
    sock = mocked.return_value.__enter__.return_value
    sock.connect.assert_called_once_with(('foo.example.com', 1))
    mocked.return_value.__exit__.assert_called_once()


def test_host_name_to_addr_ipv6() -> None:
    mocked = _mock_socket(('2001:db8::ff00:42:8329', 1, 0, 0))
    with mock.patch('socket.socket', mocked):
        address = host_name_to_addr('foo.example.com', 'ipv6')

    assert address == (0x2001, 0xDB8, 0, 0, 0, 0xFF00, 0x42, 0x8329)
    assert len(address) == 8
    mocked.assert_called_once_with(socket.AF_INET6, socket.SOCK_DGRAM)


def test_host_name_to_addr_ipv6_scope_id() -> None:
    mocked = _mock_socket(('fe80::1%eth0', 1, 0, 2))
    with mock.patch('socket.socket', mocked):
        address = host_name_to_addr('router', 'ipv6')
    assert address == (0xFE80, 0, 0, 0, 0, 0, 0, 1)


def test_host_name_to_addr_probe_port() -> None:
    mocked = _mock_socket(('192.0.2.17', 9))
    config = ResolverConfig(probe_port=9)
    with mock.patch('socket.socket', mocked):
        host_name_to_addr('foo', config=config)
    sock = mocked.return_value.__enter__.return_value
    sock.connect.assert_called_once_with(('foo', 9))


@pytest.mark.parametrize(
    'error',
    (
        socket.gaierror(socket.EAI_NONAME, 'Name or service not known'),
        OSError('Network is unreachable'),
        UnicodeError('label empty or too long'),
    ),
)
def test_host_name_to_addr_failure(error: Exception) -> None:
    mocked = mock.MagicMock()
    sock = mocked.return_value.__enter__.return_value
    sock.connect.side_effect = error
    with mock.patch('socket.socket', mocked):
        assert host_name_to_addr('nowhere.invalid') is None
    # Socket is released on failure too
    mocked.return_value.__exit__.assert_called_once()


@pytest.mark.parametrize(
    ('name', 'family'),
    (
        ('foo\x00bar', 'ipv4'),
        ('foo\x00bar', 'ipv6'),
        ('\udcff.example.com', 'ipv4'),
    ),
)
def test_host_name_to_addr_malformed_name(name: str, family: str) -> None:
    assert host_name_to_addr(name, family) is None


def test_host_name_to_addr_bad_family() -> None:
    with pytest.raises(ValueError, match='Unknown address family'):
        host_name_to_addr('localhost', 'ipx')


@pytest.mark.parametrize(
    ('address', 'expected'),
    (
        ((127, 0, 0, 1), '127.0.0.1'),
        ((0, 0, 0, 0, 0, 0, 0, 1), '::1'),
        ((0x2001, 0xDB8, 0, 0, 0, 0, 0, 0x1), '2001:db8::1'),
    ),
)
def test_format_address(address: tuple[int, ...], expected: str) -> None:
    assert format_address(address) == expected


def test_format_address_bad_length() -> None:
    with pytest.raises(ValueError, match='4 or 8 parts'):
        format_address((1, 2, 3))
