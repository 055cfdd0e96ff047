"""
Text measurement and formatting helpers.

Terminal column accounting for strings that may carry ANSI color codes or
zero-width characters.
"""

import math
import re

from .constants import PERCENT_LABEL_WIDTH


# ============================================================================
# Visible width
# ============================================================================

# Code points that never take a column: zero-width space/non-joiner/joiner,
# word joiner, byte order mark, private use areas, combining marks.
_ZERO_WIDTH = (
    "["
    "\U0000200b-\U0000200d"
    "\U00002060"
    "\U0000feff"
    "\U0000e000-\U0000f8ff"
    "\U000f0000-\U0010ffff"
    "\U00000300-\U0000036f"
    "\U00001ab0-\U00001aff"
    "\U00001dc0-\U00001dff"
    "\U000020d0-\U000020ff"
    "\U0000fe20-\U0000fe2f"
    "]"
)

ZERO_WIDTH_PATTERN = re.compile(_ZERO_WIDTH)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return re.sub(r'\x1b\[[0-9;]*m', '', text)


def visible_width(text: str) -> int:
    """
    Number of terminal columns a string occupies.

    Color sequences and zero-width/combining characters are not counted.
    This is an approximation: wide East-Asian characters count as one column,
    and grapheme clusters and variation selectors are not recognised.
    """
    return len(ZERO_WIDTH_PATTERN.sub("", strip_ansi(text)))


def pad_visible(text: str, width: int) -> str:
    """Right-pad text with spaces up to a visible width (never truncates)."""
    return text + " " * max(width - visible_width(text), 0)


# ============================================================================
# Progress values
# ============================================================================

def clamp_unit(value: float) -> float:
    """Clamp a progress value into [0, 1]. NaN counts as 0."""
    if math.isnan(value) or value < 0:
        return 0.0
    if value > 1:
        return 1.0
    return float(value)


def format_percent(value: float) -> str:
    """Format a progress value as a right-aligned percent label, e.g. ' 42%'."""
    percent = int(math.floor(value * 100 + 0.5))
    return f"{percent}%".rjust(PERCENT_LABEL_WIDTH)
