# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       url
"""
from typing import List, Tuple, Optional

from ..common.utils import text_, parse_port
from ..common.constants import AT, COLON, SLASH, DEFAULT_ALLOWED_URL_SCHEMES
from ..exception import UnknownScheme, WrongAddress


class Url:
    """Proxy URL of form ``scheme://[username[:password]@]hostname[:port]``.

    Hostname may be a domain name, an IPv4 or an IPv6 address.  IPv6
    addresses are kept within brackets, so that ``netloc`` can be fed
    back into a dialer as is.
    """

    def __init__(
            self,
            scheme: Optional[bytes] = None,
            username: Optional[bytes] = None,
            password: Optional[bytes] = None,
            hostname: Optional[bytes] = None,
            port: Optional[int] = None,
    ) -> None:
        self.scheme: Optional[bytes] = scheme
        self.username: Optional[bytes] = username
        self.password: Optional[bytes] = password
        self.hostname: Optional[bytes] = hostname
        self.port: Optional[int] = port

    def netloc(self, default_port: int) -> str:
        """Returns ``hostname:port`` using ``default_port`` when URL carries none."""
        assert self.hostname
        port = default_port if self.port is None else self.port
        return '%s:%d' % (text_(self.hostname), port)

    def __str__(self) -> str:
        url = ''
        if self.scheme:
            url += '{0}://'.format(text_(self.scheme))
        if self.hostname:
            url += text_(self.hostname)
        if self.port is not None:
            url += ':{0}'.format(self.port)
        return url

    @classmethod
    def from_bytes(cls, raw: bytes, allowed_url_schemes: Optional[List[bytes]] = None) -> 'Url':
        """Parse a proxy URL.

        Scheme is mandatory and must be one of ``allowed_url_schemes``.
        Trailing path, if any, is ignored.
        """
        parts = raw.split(b'://', 1)
        if len(parts) != 2:
            raise UnknownScheme(b'')
        scheme, rest = parts[0].lower(), parts[1]
        if scheme not in (allowed_url_schemes or DEFAULT_ALLOWED_URL_SCHEMES):
            raise UnknownScheme(scheme)
        netloc = rest.split(SLASH, 1)[0]
        try:
            username, password, host, port = Url._parse(netloc)
        except ValueError as e:
            raise WrongAddress(text_(netloc)) from e
        if not host:
            raise WrongAddress(text_(netloc))
        return cls(
            scheme=scheme,
            username=username,
            password=password,
            hostname=host,
            port=port,
        )

    @staticmethod
    def _parse(raw: bytes) -> Tuple[
            Optional[bytes],
            Optional[bytes],
            bytes,
            Optional[int],
    ]:
        split_at = raw.rsplit(AT, 1)
        username, password = None, None
        if len(split_at) == 2:
            credentials = split_at[0].split(COLON, 1)
            username = credentials[0]
            if len(credentials) == 2:
                password = credentials[1]
        parts = split_at[-1].split(COLON, 2)
        num_parts = len(parts)
        port: Optional[int] = None
        # No port found
        if num_parts == 1:
            return username, password, parts[0], None
        # Host and port found
        if num_parts == 2:
            return username, password, COLON.join(parts[:-1]), parse_port(text_(parts[-1]))
        # More than a single COLON i.e. IPv6 scenario
        hostport = split_at[-1]
        if hostport.startswith(b'[') and not hostport.endswith(b']'):
            # [v6]:port
            host, _, rport = hostport.rpartition(COLON)
            return username, password, host, parse_port(text_(rport))
        host = hostport
        if not host.startswith(b'['):
            host = b'[' + host + b']'
        return username, password, host, port
