# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .socks4 import entry_point


if __name__ == '__main__':
    entry_point()
