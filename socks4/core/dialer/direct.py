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
import logging

from typing import Optional

from .base import Dialer
from ..connection import TcpServerConnection
from ...common.flag import flags
from ...common.types import HostPort
from ...common.utils import address_family, split_host_port
from ...common.constants import DEFAULT_TIMEOUT, DIRECT_NETWORKS, NETWORK_FAMILIES
from ...exception import WrongNetwork, WrongAddress

logger = logging.getLogger(__name__)


flags.add_argument(
    '--timeout',
    type=float,
    default=DEFAULT_TIMEOUT,
    help='Default: ' + str(DEFAULT_TIMEOUT) +
    '.  Number of seconds after which an unresponsive proxy connection is dropped.',
)


class DirectDialer(Dialer):
    """Connects directly to the requested address, no proxy involved."""

    def __init__(
            self,
            timeout: float = DEFAULT_TIMEOUT,
            source_address: Optional[HostPort] = None,
    ) -> None:
        self.timeout = timeout
        self.source_address = source_address

    def dial(self, network: str, addr: str) -> TcpServerConnection:
        """Opens a TCP stream to ``addr``.

        ``tcp4`` and ``tcp6`` restrict the stream to IPv4 and IPv6
        respectively, an IP literal of the other family is a wrong address.
        """
        if network not in DIRECT_NETWORKS:
            raise WrongNetwork(network)
        try:
            host, port = split_host_port(addr)
        except ValueError as e:
            raise WrongAddress(addr) from e
        family = NETWORK_FAMILIES[network]
        ip_family = address_family(host)
        if ip_family is not None and family not in (socket.AF_UNSPEC, ip_family):
            raise WrongAddress(addr)
        conn = TcpServerConnection(host, port)
        conn.connect(
            timeout=self.timeout,
            source_address=self.source_address,
            family=family,
        )
        logger.debug('Connected to %s over %s', conn.tag, network)
        return conn
