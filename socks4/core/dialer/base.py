# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from abc import ABC, abstractmethod

from ..connection import TcpConnection


class Dialer(ABC):
    """Base class for everything capable of opening a stream to a network address.

    ``network`` is one of ``tcp``, ``tcp4`` or ``tcp6``, ``addr`` is a
    ``host:port`` string.  Implementations must either return an open
    :class:`TcpConnection` or raise, never both.
    """

    @abstractmethod
    def dial(self, network: str, addr: str) -> TcpConnection:
        raise NotImplementedError()     # pragma: no cover
