# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket

from typing import Optional

from .connection import TcpConnection, TcpConnectionUninitializedException
from ...common.types import HostPort, TcpOrTlsSocket
from ...common.utils import new_socket_connection
from ...common.constants import DEFAULT_TIMEOUT


class TcpServerConnection(TcpConnection):
    """A buffered connection to a remote server."""

    def __init__(self, host: str, port: int) -> None:
        super().__init__('%s:%d' % (host, port))
        self._conn: Optional[TcpOrTlsSocket] = None
        self.addr: HostPort = (host, port)
        self.closed = True

    @property
    def connection(self) -> TcpOrTlsSocket:
        if self._conn is None:
            raise TcpConnectionUninitializedException()
        return self._conn

    def connect(
            self,
            timeout: float = DEFAULT_TIMEOUT,
            source_address: Optional[HostPort] = None,
            family: int = socket.AF_UNSPEC,
    ) -> None:
        assert self._conn is None
        self._conn = new_socket_connection(
            self.addr,
            timeout=timeout,
            source_address=source_address,
            family=family,
        )
        self.closed = False
