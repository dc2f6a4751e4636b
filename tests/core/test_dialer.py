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
import unittest
from unittest import mock

from socks4.core.dialer import DirectDialer
from socks4.exception import WrongNetwork, WrongAddress


class TestDirectDialer(unittest.TestCase):

    @mock.patch('socks4.core.connection.server.new_socket_connection')
    def test_dial(self, mock_new_socket_connection: mock.Mock) -> None:
        dialer = DirectDialer(timeout=3.0, source_address=('10.0.0.2', 0))
        conn = dialer.dial('tcp', 'proxy.example.com:1080')
        mock_new_socket_connection.assert_called_once_with(
            ('proxy.example.com', 1080),
            timeout=3.0,
            source_address=('10.0.0.2', 0),
            family=socket.AF_UNSPEC,
        )
        self.assertEqual(
            conn.connection,
            mock_new_socket_connection.return_value,
        )
        self.assertFalse(conn.closed)

    @mock.patch('socks4.core.connection.server.new_socket_connection')
    def test_dial_ipv6(self, mock_new_socket_connection: mock.Mock) -> None:
        DirectDialer().dial('tcp6', '[::1]:1080')
        self.assertEqual(
            mock_new_socket_connection.call_args[0][0],
            ('::1', 1080),
        )

    @mock.patch('socks4.core.connection.server.new_socket_connection')
    def test_wrong_network(self, mock_new_socket_connection: mock.Mock) -> None:
        with self.assertRaises(WrongNetwork) as ctx:
            DirectDialer().dial('udp', '127.0.0.1:1080')
        self.assertEqual(ctx.exception.network, 'udp')
        mock_new_socket_connection.assert_not_called()

    @mock.patch('socks4.core.connection.server.new_socket_connection')
    def test_wrong_address(self, mock_new_socket_connection: mock.Mock) -> None:
        with self.assertRaises(WrongAddress) as ctx:
            DirectDialer().dial('tcp', '127.0.0.1')
        self.assertEqual(ctx.exception.addr, '127.0.0.1')
        self.assertIsInstance(ctx.exception.__cause__, ValueError)
        mock_new_socket_connection.assert_not_called()

    @mock.patch('socks4.core.connection.server.new_socket_connection')
    def test_connection_error_propagates(self, mock_new_socket_connection: mock.Mock) -> None:
        mock_new_socket_connection.side_effect = ConnectionRefusedError()
        with self.assertRaises(ConnectionRefusedError):
            DirectDialer().dial('tcp4', '127.0.0.1:1080')

    @mock.patch('socks4.core.connection.server.new_socket_connection')
    def test_network_restricts_family(self, mock_new_socket_connection: mock.Mock) -> None:
        for network, family in (
            ('tcp', socket.AF_UNSPEC),
            ('tcp4', socket.AF_INET),
            ('tcp6', socket.AF_INET6),
        ):
            with self.subTest(network=network):
                DirectDialer().dial(network, 'proxy.example.com:1080')
                self.assertEqual(
                    mock_new_socket_connection.call_args[1]['family'],
                    family,
                )

    @mock.patch('socks4.core.connection.server.new_socket_connection')
    def test_ipv4_literal_over_tcp6(self, mock_new_socket_connection: mock.Mock) -> None:
        with self.assertRaises(WrongAddress) as ctx:
            DirectDialer().dial('tcp6', '127.0.0.1:1080')
        self.assertEqual(ctx.exception.addr, '127.0.0.1:1080')
        mock_new_socket_connection.assert_not_called()

    @mock.patch('socks4.core.connection.server.new_socket_connection')
    def test_ipv6_literal_over_tcp4(self, mock_new_socket_connection: mock.Mock) -> None:
        with self.assertRaises(WrongAddress) as ctx:
            DirectDialer().dial('tcp4', '[::1]:1080')
        self.assertEqual(ctx.exception.addr, '[::1]:1080')
        mock_new_socket_connection.assert_not_called()
