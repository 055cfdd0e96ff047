"""
Shared color definitions for terminal output.

The palette is closed: 16 named colors plus DEFAULT, which resets the
foreground (ESC[39m) or background (ESC[49m) to the terminal default.
"""

from enum import Enum
from typing import Optional, Union


# SGR foreground code per palette entry; background is foreground + 10
_FG_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "gray": 90,
    "bright_red": 91,
    "bright_green": 92,
    "bright_yellow": 93,
    "bright_blue": 94,
    "bright_magenta": 95,
    "bright_cyan": 96,
    "bright_white": 97,
    "default": 39,
}


class Color(str, Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    GRAY = "gray"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"
    DEFAULT = "default"

    @property
    def fg(self) -> str:
        """Escape that switches the foreground to this color."""
        return f"\x1b[{_FG_CODES[self.value]}m"

    @property
    def bg(self) -> str:
        """Escape that switches the background to this color."""
        return f"\x1b[{_FG_CODES[self.value] + 10}m"


# Closing codes used after every colored span
FG_OFF = Color.DEFAULT.fg
BG_OFF = Color.DEFAULT.bg


ColorLike = Union[Color, str]


def resolve_color(color: Optional[ColorLike]) -> Optional[Color]:
    """Look up a palette entry by member or name. None stays None."""
    if color is None or isinstance(color, Color):
        return color
    return Color(color)


def colorize(text: str, color: Optional[Color]) -> str:
    """Wrap text in a foreground color and the default-foreground reset."""
    if color is None:
        return text
    return f"{color.fg}{text}{FG_OFF}"
