"""
User interface module.

Terminal colors, control sequences, and rendering components.
"""

from .colors import Color, FG_OFF, BG_OFF, resolve_color, colorize
from .terminal import (
    HIDE_CURSOR,
    SHOW_CURSOR,
    HOME_AND_CLEAR,
    clear_screen,
    terminal_size,
    hidden_cursor,
)

__all__ = [
    # Colors
    "Color",
    "FG_OFF",
    "BG_OFF",
    "resolve_color",
    "colorize",
    # Terminal
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "HOME_AND_CLEAR",
    "clear_screen",
    "terminal_size",
    "hidden_cursor",
]
