"""
Core helpers shared by the renderers.

Glyph tables, defaults, and text measurement.
"""

from .constants import (
    FULL_BLOCK,
    HORIZONTAL_EIGHTHS,
    VERTICAL_EIGHTHS,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_VERTICAL_BAR_WIDTH,
    PERCENT_LABEL_WIDTH,
)
from .formatting import (
    strip_ansi,
    visible_width,
    pad_visible,
    clamp_unit,
    format_percent,
)

__all__ = [
    # Constants
    "FULL_BLOCK",
    "HORIZONTAL_EIGHTHS",
    "VERTICAL_EIGHTHS",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_VERTICAL_BAR_WIDTH",
    "PERCENT_LABEL_WIDTH",
    # Formatting
    "strip_ansi",
    "visible_width",
    "pad_visible",
    "clamp_unit",
    "format_percent",
]
