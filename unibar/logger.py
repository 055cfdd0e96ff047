"""
Logging setup for unibar.

Library modules only log at DEBUG through get_logger(). The demo calls
init_logging() once; records go to stderr so they never mix with frames
drawn on stdout.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

# Console used by RichHandler (stderr; stdout carries the rendered frames)
LOG_CONSOLE = Console(file=sys.stderr, soft_wrap=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def build_console_handler(level: int) -> logging.Handler:
    handler = RichHandler(
        console=LOG_CONSOLE,
        level=level,
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
    )
    # RichHandler renders the level column itself
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def init_logging(verbose: bool = False) -> None:
    """
    Configure the root logger.

    Safe to call more than once: the previous Rich handler is replaced.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    root.setLevel(level)
    root.addHandler(build_console_handler(level))
