"""
Terminal control helpers.

Screen clearing, cursor visibility, and size queries for redraw loops.
"""

import shutil
import sys
from contextlib import contextmanager

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
HOME_AND_CLEAR = "\x1b[1;1H\x1b[2J"

# Used when the output is not a terminal
FALLBACK_SIZE = (80, 40)


def clear_screen(stream=None):
    """Move the cursor home and clear the terminal screen."""
    stream = stream or sys.stdout
    stream.write(HOME_AND_CLEAR)
    stream.flush()


def terminal_size() -> tuple[int, int]:
    """Return (columns, lines) of the terminal."""
    size = shutil.get_terminal_size(FALLBACK_SIZE)
    return size.columns, size.lines


@contextmanager
def hidden_cursor(stream=None):
    """Hide the cursor for the duration of the block, showing it again on exit."""
    stream = stream or sys.stdout
    stream.write(HIDE_CURSOR)
    stream.flush()
    try:
        yield stream
    finally:
        stream.write(SHOW_CURSOR)
        stream.flush()
