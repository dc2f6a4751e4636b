# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import logging

from typing import Any, List, Optional

from .socks import dialer_from_url
from .exception import Socks4Exception
from .common.flag import FlagParser, flags
from .common.constants import (
    DEFAULT_VERSION, DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_FORMAT, DEFAULT_NETWORK,
)
from .core.dialer import DirectDialer


logger = logging.getLogger(__name__)


flags.add_argument(
    '--version',
    '-v',
    action='store_true',
    default=DEFAULT_VERSION,
    help='Prints socks4.py version.',
)

flags.add_argument(
    '--log-level',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    help='Valid options: DEBUG, INFO (default), WARNING, ERROR, CRITICAL. '
    'Both upper and lowercase values are allowed. '
    'You may also simply use the leading character e.g. --log-level d',
)

flags.add_argument(
    '--log-file',
    type=str,
    default=DEFAULT_LOG_FILE,
    help='Default: sys.stdout. Log file destination.',
)

flags.add_argument(
    '--log-format',
    type=str,
    default=DEFAULT_LOG_FORMAT,
    help='Log format for Python logger.',
)

flags.add_argument(
    '--network',
    type=str,
    default=DEFAULT_NETWORK,
    help='Default: ' + DEFAULT_NETWORK + '.  Valid options: tcp, tcp4.',
)

flags.add_argument(
    'target',
    nargs='?',
    default=None,
    help='Destination address of form host:port to CONNECT to via proxy.',
)


def main(input_args: Optional[List[str]] = None, **opts: Any) -> int:
    """Performs a single handshake with target via configured proxy.

    Returns process exit code, 0 when proxy granted the connection."""
    args = FlagParser.initialize(input_args, **opts)
    target = opts.get('target', args.target)
    if not target:
        flags.parser.error('target address is required')
    try:
        dialer = dialer_from_url(
            args.proxy,
            DirectDialer(timeout=args.timeout),
            ident=args.ident,
        )
        conn = dialer.dial(args.network, target)
    except Socks4Exception as e:
        cause = e.__cause__
        logger.error(
            'Unable to reach %s via %s: %s%s',
            target, args.proxy, e,
            '' if cause is None else ' (%s)' % cause,
        )
        return 1
    conn.close()
    logger.info('Proxy %s granted connection to %s', args.proxy, target)
    return 0


def entry_point() -> None:
    sys.exit(main(sys.argv[1:]))
