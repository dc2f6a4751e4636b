# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       utils
"""
import re
import socket
import ipaddress

from typing import Any, Optional, Tuple

from .types import HostPort
from .constants import DEFAULT_TIMEOUT


PORT_PATTERN = re.compile(r'[0-9]+')


def text_(s: Any, encoding: str = 'utf-8', errors: str = 'strict') -> Any:
    """Utility to ensure text-like usability.

    If s is of type bytes or int, return s.decode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        return str(s)
    if isinstance(s, bytes):
        return s.decode(encoding, errors)
    return s


def bytes_(s: Any, encoding: str = 'utf-8', errors: str = 'strict') -> Any:
    """Utility to ensure binary-like usability.

    If s is type str or int, return s.encode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        s = str(s)
    if isinstance(s, str):
        return s.encode(encoding, errors)
    return s


def parse_port(port: str) -> int:
    """Parse a base-10 port number within 1..65535.

    Raises ``ValueError`` for signs, whitespace and out of range values."""
    if PORT_PATTERN.fullmatch(port) is None:
        raise ValueError('invalid port %r' % port)
    iport = int(port)
    if not 0 < iport <= 0xFFFF:
        raise ValueError('port %d out of range' % iport)
    return iport


def split_host_port(addr: str) -> HostPort:
    """Split a network address of form ``host:port`` or ``[host]:port``.

    Port must be a base-10 integer within 1..65535.  Raises ``ValueError``
    for anything else, including unbracketed IPv6 literals."""
    host, sep, port = addr.rpartition(':')
    if not sep:
        raise ValueError('missing port in address')
    if host.startswith('['):
        if not host.endswith(']'):
            raise ValueError('missing ] in address')
        host = host[1:-1]
    elif ':' in host:
        raise ValueError('too many colons in address')
    elif '[' in host or ']' in host:
        raise ValueError('unexpected bracket in address')
    return host, parse_port(port)


def address_family(host: str) -> Optional[int]:
    """Returns ``AF_INET`` or ``AF_INET6`` for IP literals, None for hostnames."""
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        return None
    return socket.AF_INET if ip.version == 4 else socket.AF_INET6


def new_socket_connection(
        addr: HostPort,
        timeout: float = DEFAULT_TIMEOUT,
        source_address: Optional[HostPort] = None,
        family: int = socket.AF_UNSPEC,
) -> socket.socket:
    """Connects to ``addr``, restricted to ``family`` unless it is ``AF_UNSPEC``.

    Raises ``ValueError`` when ``addr`` is an IP literal of another family."""
    ip_family = address_family(addr[0])
    if ip_family is None:
        if family == socket.AF_UNSPEC:
            # does not appear to be an IPv4 or IPv6 address,
            # try to establish dual stack IPv4/IPv6 connection.
            return socket.create_connection(
                addr, timeout=timeout, source_address=source_address,
            )
        return _connect_resolved(addr, family, timeout, source_address)
    if family not in (socket.AF_UNSPEC, ip_family):
        raise ValueError('%s is not an address of family %r' % (addr[0], family))
    remote: Tuple[Any, ...] = addr
    if ip_family == socket.AF_INET6:
        remote = (addr[0], addr[1], 0, 0)
    return _connect(ip_family, remote, timeout, source_address)


def _connect_resolved(
        addr: HostPort,
        family: int,
        timeout: float,
        source_address: Optional[HostPort],
) -> socket.socket:
    err: Optional[OSError] = None
    for af, _, _, _, sockaddr in socket.getaddrinfo(
            addr[0], addr[1], family, socket.SOCK_STREAM,
    ):
        try:
            return _connect(af, sockaddr, timeout, source_address)
        except OSError as e:
            err = e
    if err is None:
        raise OSError('getaddrinfo returned no %r address for %s' % (family, addr[0]))
    raise err


def _connect(
        family: int,
        remote: Tuple[Any, ...],
        timeout: float,
        source_address: Optional[HostPort],
) -> socket.socket:
    conn = socket.socket(family, socket.SOCK_STREAM, 0)
    try:
        conn.settimeout(timeout)
        if source_address:
            conn.bind(source_address)
        conn.connect(remote)
    except OSError:
        conn.close()
        raise
    return conn
