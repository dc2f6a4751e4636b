# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .socks4 import main, entry_point
from .socks import Socks4Dialer, dialer_from_url, register_dialer_type
from .core.dialer import Dialer, DirectDialer
from .exception import (
    Socks4Exception, WrongNetwork, WrongAddress, DialFailed, HostUnknown,
    Socks4IOError, IdentRequired, ConnectionRejected, InvalidResponse,
    UnknownScheme,
)


__all__ = [
    # PyPi package entry_point.
    'entry_point',
    # Embed socks4.py probe.
    'main',
    'Dialer',
    'DirectDialer',
    'Socks4Dialer',
    'dialer_from_url',
    'register_dialer_type',
    'Socks4Exception',
    'WrongNetwork',
    'WrongAddress',
    'DialFailed',
    'HostUnknown',
    'Socks4IOError',
    'IdentRequired',
    'ConnectionRejected',
    'InvalidResponse',
    'UnknownScheme',
]
