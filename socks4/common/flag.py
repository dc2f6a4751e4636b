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
import argparse

from typing import Optional, List, Any, cast

from .logger import Logger
from .version import __version__

__homepage__ = 'https://github.com/abhinavsingh/socks4.py'


class FlagParser:
    """Wrapper around argparse module.

    Import `flag.flags` and use `add_argument` API
    to define custom flags within respective Python files.

    Best Practice:
    1. Define flags at the top of your class files.
    2. DO NOT add flags within your class `__init__` method OR
       within class methods.  It MAY result into runtime exception,
       especially if your class is initialized multiple times or if
       class method registering the flag gets invoked multiple times.
    """

    def __init__(self) -> None:
        self.args: Optional[argparse.Namespace] = None
        self.actions: List[str] = []
        self.parser = argparse.ArgumentParser(
            description='socks4.py v%s' % __version__,
            epilog='socks4.py not working? Report at: %s/issues/new' % __homepage__,
        )

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register a flag."""
        action = self.parser.add_argument(*args, **kwargs)
        self.actions.append(action.dest)
        return action

    def parse_args(
            self, input_args: Optional[List[str]],
    ) -> argparse.Namespace:
        """Parse flags from input arguments."""
        self.args = self.parser.parse_args(input_args)
        return self.args

    @staticmethod
    def initialize(
        input_args: Optional[List[str]] = None,
        **opts: Any,
    ) -> argparse.Namespace:
        """Parse flags and resolve final values.

        Keyword ``opts`` take precedence over parsed flags, which lets
        embedding applications configure e.g. a process-wide default
        ``ident`` without touching the command line.
        """
        if input_args is None:
            input_args = []

        # Parse flags
        args = flags.parse_args(input_args)

        # Print version and exit
        if args.version:
            print(__version__)
            sys.exit(0)

        # Setup logging module
        Logger.setup(
            opts.get('log_file', args.log_file),
            opts.get('log_level', args.log_level),
            opts.get('log_format', args.log_format),
        )

        args.proxy = cast(str, opts.get('proxy', args.proxy))
        args.ident = cast(str, opts.get('ident', args.ident))
        args.network = cast(str, opts.get('network', args.network))
        args.timeout = cast(float, opts.get('timeout', args.timeout))

        return args


flags = FlagParser()
