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
       dialer
"""
import socket
import logging

from typing import Optional

from .packet import Socks4Packet, Socks4Reply
from .operations import socks4Operations, socks4Replies, socks4Schemes
from ..common.flag import flags
from ..common.types import HostPort
from ..common.utils import bytes_, split_host_port
from ..common.constants import (
    DEFAULT_IDENT, SOCKS4_NETWORKS, SOCKS4A_SENTINEL_IP,
    SOCKS4_MIN_REQUEST_LEN, SOCKS4_REPLY_LEN,
)
from ..core.dialer import Dialer, DirectDialer
from ..core.connection import TcpConnection
from ..exception import (
    WrongNetwork, WrongAddress, DialFailed, HostUnknown,
    Socks4IOError, IdentRequired, ConnectionRejected, InvalidResponse,
)

logger = logging.getLogger(__name__)


flags.add_argument(
    '--ident',
    type=str,
    default=DEFAULT_IDENT,
    help='Default: ' + DEFAULT_IDENT + '.  USERID sent to SOCKS4 proxy servers.',
)


class Socks4Dialer(Dialer):
    """Dials through a SOCKS4 or SOCKS4a proxy.

    Reference https://www.openssh.com/txt/socks4.protocol
    and https://www.openssh.com/txt/socks4a.protocol

    For SOCKS4 the destination host is resolved locally into an
    IPv4 address.  For SOCKS4a the hostname is sent as is and
    the proxy server performs the resolution.

    Instances are read-only after construction and safe to share
    between threads.  Each call to ``dial`` opens a fresh stream to
    the proxy using ``forward`` and either returns it after a
    successful handshake or closes it and raises a
    :exc:`Socks4Exception`.
    """

    def __init__(
            self,
            proxy_addr: str,
            scheme: bytes = socks4Schemes.SOCKS4A,
            forward: Optional[Dialer] = None,
            ident: str = DEFAULT_IDENT,
    ) -> None:
        if scheme not in socks4Schemes:
            raise ValueError('Unsupported scheme %r' % scheme)
        if '\x00' in ident:
            raise ValueError('ident must not contain NUL characters')
        self._proxy_addr = proxy_addr
        self._scheme = scheme
        self._forward: Dialer = forward or DirectDialer()
        self._ident = ident

    @property
    def proxy_addr(self) -> str:
        return self._proxy_addr

    @property
    def scheme(self) -> bytes:
        return self._scheme

    @property
    def forward(self) -> Dialer:
        return self._forward

    @property
    def ident(self) -> str:
        return self._ident

    def is_socks4a(self) -> bool:
        return self._scheme == socks4Schemes.SOCKS4A

    def dial(self, network: str, addr: str) -> TcpConnection:
        if network not in SOCKS4_NETWORKS:
            raise WrongNetwork(network)
        host, port = self.parse_addr(addr)
        try:
            conn = self._forward.dial(network, self._proxy_addr)
        except Exception as e:
            raise DialFailed(self._proxy_addr) from e
        logger.debug(
            'Connected to %s proxy %s for %s',
            self._scheme.decode(), self._proxy_addr, addr,
        )
        try:
            self.handshake(conn, host, port)
        except Exception:
            conn.close()
            raise
        return conn

    def handshake(self, conn: TcpConnection, host: str, port: int) -> None:
        """Performs CONNECT request/reply exchange over ``conn``.

        Raises a :exc:`Socks4Exception` subclass on failure.
        Caller owns ``conn`` and must close it on failure.
        """
        self.send_request(conn, self.build_request(host, port))
        reply = self.read_reply(conn)
        logger.debug(
            'Proxy %s replied %#04x for %s:%d',
            self._proxy_addr, reply.cd, host, port,
        )
        if reply.cd == socks4Replies.GRANTED:
            return
        assert reply.cd is not None
        if reply.cd in (socks4Replies.IDENT_REQUIRED, socks4Replies.IDENT_FAILED):
            raise IdentRequired(reply.cd)
        if reply.cd == socks4Replies.REJECTED:
            raise ConnectionRejected(reply.cd)
        raise InvalidResponse(reply.cd)

    def build_request(self, host: str, port: int) -> bytes:
        pkt = Socks4Packet()
        pkt.cd = socks4Operations.CONNECT
        pkt.dstport = port
        pkt.userid = bytes_(self._ident)
        if self.is_socks4a():
            pkt.dstip = SOCKS4A_SENTINEL_IP.packed
            pkt.hostname = bytes_(host)
        else:
            pkt.dstip = socket.inet_aton(self.lookup_addr(host))
        return pkt.pack()

    @staticmethod
    def lookup_addr(host: str) -> str:
        """Resolves host into an IPv4 address."""
        try:
            return socket.gethostbyname(host)
        except (OSError, UnicodeError) as e:
            raise HostUnknown(host) from e

    @staticmethod
    def parse_addr(addr: str) -> HostPort:
        try:
            host, port = split_host_port(addr)
        except ValueError as e:
            raise WrongAddress(addr) from e
        if not host or '\x00' in host:
            raise WrongAddress(addr)
        try:
            host.encode('utf-8')
        except UnicodeEncodeError as e:
            raise WrongAddress(addr) from e
        return host, port

    @staticmethod
    def send_request(conn: TcpConnection, request: bytes) -> None:
        conn.queue(memoryview(request))
        sent = 0
        try:
            while conn.has_buffer():
                flushed = conn.flush()
                if flushed == 0:
                    break
                sent += flushed
        except OSError as e:
            raise Socks4IOError('write failed') from e
        if sent < SOCKS4_MIN_REQUEST_LEN or conn.has_buffer():
            raise Socks4IOError('short write') from OSError(
                'wrote %d of %d bytes' % (sent, len(request)),
            )

    @staticmethod
    def read_reply(conn: TcpConnection) -> Socks4Reply:
        raw = b''
        try:
            while len(raw) < SOCKS4_REPLY_LEN:
                data = conn.recv(SOCKS4_REPLY_LEN - len(raw))
                if data is None:
                    break
                raw += data.tobytes()
        except OSError as e:
            raise Socks4IOError('read failed') from e
        if len(raw) != SOCKS4_REPLY_LEN:
            raise Socks4IOError('unexpected EOF') from EOFError(
                'unexpected end of stream after %d bytes' % len(raw),
            )
        reply = Socks4Reply()
        reply.parse(memoryview(raw))
        return reply
