# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import struct

from typing import Optional

from ..common.constants import NULL, SOCKS4_VERSION, SOCKS4_REPLY_LEN


class Socks4Packet:
    """SOCKS4 and SOCKS4a request packet.

    Packet is a SOCKS4a request when ``hostname`` is set, in which
    case ``dstip`` is expected to be of form 0.0.0.x with x != 0.
    """

    def __init__(self) -> None:
        # 1 byte, must be equal to 4
        self.vn: int = SOCKS4_VERSION
        # 1 byte
        self.cd: Optional[int] = None
        # 2 bytes
        self.dstport: Optional[int] = None
        # 4 bytes
        self.dstip: Optional[bytes] = None
        # Variable bytes, NULL terminated
        self.userid: Optional[bytes] = None
        # Variable bytes, NULL terminated, SOCKS4a only
        self.hostname: Optional[bytes] = None

    def pack(self) -> bytes:
        assert self.cd is not None and self.dstport is not None
        assert self.dstip is not None and len(self.dstip) == 4
        user_id = self.userid or b''
        pkt = struct.pack(
            '!BBH4s%ds' % len(user_id),
            self.vn, self.cd,
            self.dstport, self.dstip,
            user_id,
        ) + NULL
        if self.hostname is not None:
            pkt += self.hostname + NULL
        return pkt


class Socks4Reply:
    """SOCKS4 reply parser.

    Reply is always 8 bytes.  Only the status code is of interest
    for a CONNECT request, rest is parsed for diagnostics.
    """

    def __init__(self) -> None:
        # 1 byte, null byte
        self.vn: Optional[int] = None
        # 1 byte
        self.cd: Optional[int] = None
        # 2 bytes
        self.dstport: Optional[int] = None
        # 4 bytes
        self.dstip: Optional[bytes] = None

    def parse(self, raw: memoryview) -> None:
        assert len(raw) == SOCKS4_REPLY_LEN
        self.vn, self.cd, self.dstport, self.dstip = struct.unpack(
            '!BBH4s', raw,
        )
