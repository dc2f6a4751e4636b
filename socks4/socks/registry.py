# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       dialer
       ident
"""
import logging

from typing import Any, Callable, Dict, Optional

from .url import Url
from .client import Socks4Dialer
from .operations import socks4Schemes
from ..common.flag import flags
from ..common.utils import bytes_, text_
from ..common.constants import DEFAULT_IDENT, DEFAULT_PROXY_URL, DEFAULT_SOCKS_PORT
from ..core.dialer import Dialer, DirectDialer

logger = logging.getLogger(__name__)

DialerFactory = Callable[..., Dialer]


flags.add_argument(
    '--proxy',
    type=str,
    default=DEFAULT_PROXY_URL,
    help='Default: ' + DEFAULT_PROXY_URL + '.  Proxy URL of form '
    'socks4://[ident@]host[:port] or socks4a://[ident@]host[:port].',
)


def socks4_factory(url: Url, forward: Dialer, **opts: Any) -> Dialer:
    """Username in URL, when present, is used as the ident."""
    assert url.scheme
    ident = text_(url.username) if url.username else opts.get('ident', DEFAULT_IDENT)
    return Socks4Dialer(
        url.netloc(DEFAULT_SOCKS_PORT),
        scheme=url.scheme,
        forward=forward,
        ident=ident,
    )


_dialer_types: Dict[bytes, DialerFactory] = {
    socks4Schemes.SOCKS4: socks4_factory,
    socks4Schemes.SOCKS4A: socks4_factory,
}


def register_dialer_type(scheme: str, factory: DialerFactory) -> None:
    """Register a factory for dialers of ``scheme``.

    ``factory`` is invoked as ``factory(url, forward, **opts)``
    and must return a :class:`Dialer`.  Registering an already
    known scheme replaces its factory.
    """
    _dialer_types[bytes_(scheme).lower()] = factory


def dialer_from_url(
        url: str,
        forward: Optional[Dialer] = None,
        **opts: Any,
) -> Dialer:
    """Returns a dialer for the proxy described by ``url``.

    Streams to the proxy itself are opened using ``forward``,
    which defaults to :class:`DirectDialer`.
    """
    parsed = Url.from_bytes(bytes_(url), list(_dialer_types.keys()))
    assert parsed.scheme
    dialer = _dialer_types[parsed.scheme](
        parsed, forward or DirectDialer(), **opts,
    )
    logger.debug('%s dialer created for %s', type(dialer).__name__, parsed)
    return dialer
