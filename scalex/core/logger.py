"""Logging utilities"""

import sys
from .colors import Colors


class Logger:
    verbose = False

    @classmethod
    def error(cls, msg: str):
        print(f"{Colors.RED}✗{Colors.RESET} {msg}", file=sys.stderr)

    @classmethod
    def plain(cls, msg: str):
        """Uncoloured line on stderr, for reports meant to be copied"""
        print(msg, file=sys.stderr)

    @classmethod
    def verbose_log(cls, msg: str):
        if cls.verbose:
            print(
                f"{Colors.CYAN}[VERBOSE]{Colors.RESET} {msg}", file=sys.stderr)
