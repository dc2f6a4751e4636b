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
import ipaddress

from typing import Dict, List


NULL = b'\x00'
COLON = b':'
SLASH = b'/'
AT = b'@'
SOCKS4_PROTO = b'socks4'
SOCKS4A_PROTO = SOCKS4_PROTO + b'a'

# Networks a SOCKS4 proxy is able to relay
SOCKS4_NETWORKS = ('tcp', 'tcp4')
# Networks the direct dialer is able to open
DIRECT_NETWORKS = SOCKS4_NETWORKS + ('tcp6',)
# Address family each network is restricted to
NETWORK_FAMILIES: Dict[str, int] = {
    'tcp': socket.AF_UNSPEC,
    'tcp4': socket.AF_INET,
    'tcp6': socket.AF_INET6,
}

SOCKS4_VERSION = 4
# vn + cd + dstport + dstip
SOCKS4_MIN_REQUEST_LEN = 8
SOCKS4_REPLY_LEN = 8
# SOCKS4a signals "hostname follows" using an IP of form 0.0.0.x, x != 0
SOCKS4A_SENTINEL_IP = ipaddress.IPv4Address('0.0.0.1')

# Defaults
DEFAULT_IDENT = 'nobody@0.0.0.0'
DEFAULT_SOCKS_PORT = 1080
DEFAULT_PROXY_URL = 'socks4a://127.0.0.1:%d' % DEFAULT_SOCKS_PORT
DEFAULT_NETWORK = 'tcp'
DEFAULT_ALLOWED_URL_SCHEMES: List[bytes] = [SOCKS4_PROTO, SOCKS4A_PROTO]
DEFAULT_BUFFER_SIZE = 128 * 1024
DEFAULT_MAX_SEND_SIZE = 64 * 1024
DEFAULT_TIMEOUT = 10.0
DEFAULT_VERSION = False
DEFAULT_LOG_FILE = None
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DEFAULT_LOG_LEVEL = 'INFO'
