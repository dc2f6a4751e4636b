# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import NamedTuple

from ..common.constants import SOCKS4_PROTO, SOCKS4A_PROTO


Socks4Operations = NamedTuple(
    'Socks4Operations', [
        ('CONNECT', int),
        ('BIND', int),
    ],
)

socks4Operations = Socks4Operations(1, 2)

Socks4Replies = NamedTuple(
    'Socks4Replies', [
        ('GRANTED', int),
        ('REJECTED', int),
        ('IDENT_REQUIRED', int),
        ('IDENT_FAILED', int),
    ],
)

socks4Replies = Socks4Replies(0x5A, 0x5B, 0x5C, 0x5D)

Socks4Schemes = NamedTuple(
    'Socks4Schemes', [
        ('SOCKS4', bytes),
        ('SOCKS4A', bytes),
    ],
)

socks4Schemes = Socks4Schemes(SOCKS4_PROTO, SOCKS4A_PROTO)
