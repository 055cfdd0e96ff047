"""
Reusable visual building blocks.

Non-interactive components that turn values into rows of text.
"""

from .box import (
    BorderStyle,
    BorderStyleName,
    BORDER_STYLES,
    resolve_border_style,
    box_row,
    make_box,
)
from .layout import (
    center_box,
    vertical_join,
)
from .horizontal import (
    horizontal_bar,
    fill_row,
    color_segments,
)
from .vertical import (
    vertical_bar,
    fill_column,
    color_rows,
    center_in,
)

__all__ = [
    # Box drawing
    "BorderStyle",
    "BorderStyleName",
    "BORDER_STYLES",
    "resolve_border_style",
    "box_row",
    "make_box",
    # Layout
    "center_box",
    "vertical_join",
    # Bars
    "horizontal_bar",
    "fill_row",
    "color_segments",
    "vertical_bar",
    "fill_column",
    "color_rows",
    "center_in",
]
