# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .url import Url
from .client import Socks4Dialer
from .packet import Socks4Packet, Socks4Reply
from .registry import dialer_from_url, register_dialer_type
from .operations import (
    Socks4Operations, socks4Operations, Socks4Replies, socks4Replies,
    Socks4Schemes, socks4Schemes,
)


__all__ = [
    'Url',
    'Socks4Dialer',
    'Socks4Packet',
    'Socks4Reply',
    'dialer_from_url',
    'register_dialer_type',
    'Socks4Operations',
    'socks4Operations',
    'Socks4Replies',
    'socks4Replies',
    'Socks4Schemes',
    'socks4Schemes',
]
