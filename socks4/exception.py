# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       ident
"""
from typing import Any, Optional


class Socks4Exception(Exception):
    """Top level :exc:`Socks4Exception` exception class.

    All exceptions raised while dialing through a SOCKS4 proxy MUST
    inherit :exc:`Socks4Exception` base class.  When an underlying error
    caused the failure, it is chained and available as ``__cause__``.
    """

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message or 'Reason unknown')


class WrongNetwork(Socks4Exception):
    """SOCKS4 protocol supports only TCP over IPv4."""

    def __init__(self, network: str, **kwargs: Any) -> None:
        self.network: str = network
        super().__init__(
            'network should be tcp or tcp4, got %r' % network, **kwargs,
        )


class WrongAddress(Socks4Exception):
    """Address must be of form ``host:port``."""

    def __init__(self, addr: str, **kwargs: Any) -> None:
        self.addr: str = addr
        super().__init__('wrong addr: %s' % addr, **kwargs)


class DialFailed(Socks4Exception):
    """Exception raised when the upstream dialer is unable to reach the proxy server."""

    def __init__(self, proxy_addr: str, **kwargs: Any) -> None:
        self.proxy_addr: str = proxy_addr
        super().__init__('socks4 dial %s failed' % proxy_addr, **kwargs)


class HostUnknown(Socks4Exception):
    """Destination host could not be resolved into an IPv4 address."""

    def __init__(self, host: str, **kwargs: Any) -> None:
        self.host: str = host
        super().__init__(
            'unable to find IP address of host %s' % host, **kwargs,
        )


class Socks4IOError(Socks4Exception):
    """Writing the request into or reading the reply from the proxy failed."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        self.reason: str = reason
        super().__init__('i/o error: %s' % reason, **kwargs)


class IdentRequired(Socks4Exception):
    """Proxy requires a valid ident.  Check configured ident."""

    def __init__(self, status: int, **kwargs: Any) -> None:
        self.status: int = status
        super().__init__('valid ident required', **kwargs)


class ConnectionRejected(Socks4Exception):

    def __init__(self, status: int, **kwargs: Any) -> None:
        self.status: int = status
        super().__init__('connection to remote host was rejected', **kwargs)


class InvalidResponse(Socks4Exception):
    """Proxy reply contains an unknown status code."""

    def __init__(self, status: int, **kwargs: Any) -> None:
        self.status: int = status
        super().__init__(
            'unknown socks4 server response %#04x' % status, **kwargs,
        )


class UnknownScheme(Socks4Exception):

    def __init__(self, scheme: bytes, **kwargs: Any) -> None:
        self.scheme: bytes = scheme
        super().__init__('proxy: unknown scheme %r' % scheme, **kwargs)
