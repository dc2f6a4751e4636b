# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import unittest

from socks4.common.flag import FlagParser, flags as global_flags
from socks4.common.constants import (
    DEFAULT_IDENT, DEFAULT_PROXY_URL, DEFAULT_TIMEOUT, DEFAULT_NETWORK,
)


class TestFlags(unittest.TestCase):

    def test_defaults(self) -> None:
        flags = FlagParser.initialize([])
        self.assertEqual(flags.ident, DEFAULT_IDENT)
        self.assertEqual(flags.proxy, DEFAULT_PROXY_URL)
        self.assertEqual(flags.timeout, DEFAULT_TIMEOUT)
        self.assertEqual(flags.network, DEFAULT_NETWORK)
        self.assertIsNone(flags.target)

    def test_from_args(self) -> None:
        flags = FlagParser.initialize([
            '--ident', 'alice',
            '--proxy', 'socks4://10.0.0.1:9050',
            '--timeout', '2.5',
            'example.com:80',
        ])
        self.assertEqual(flags.ident, 'alice')
        self.assertEqual(flags.proxy, 'socks4://10.0.0.1:9050')
        self.assertEqual(flags.timeout, 2.5)
        self.assertEqual(flags.target, 'example.com:80')

    def test_opts_override_args(self) -> None:
        flags = FlagParser.initialize(
            ['--ident', 'alice'], ident='bob', timeout=1.0,
        )
        self.assertEqual(flags.ident, 'bob')
        self.assertEqual(flags.timeout, 1.0)

    def test_version(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            FlagParser.initialize(['--version'])
        self.assertEqual(ctx.exception.code, 0)

    def test_epilog_links_project_issues(self) -> None:
        epilog = global_flags.parser.epilog
        assert epilog is not None
        self.assertTrue(
            'https://github.com/abhinavsingh/socks4.py/issues/new' in epilog,
        )
