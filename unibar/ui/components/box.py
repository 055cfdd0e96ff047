"""
Box drawing primitives.

Border styles and helpers for framing blocks of text lines.
"""

from enum import Enum
from typing import NamedTuple, Optional, Sequence, Union

from unibar.core.formatting import visible_width
from ..colors import FG_OFF, Color, ColorLike, resolve_color


class BorderStyle(NamedTuple):
    """Eight border glyphs: four corners, then the four edges."""
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    top: str
    bottom: str
    left: str
    right: str


class BorderStyleName(str, Enum):
    SPACE = "space"
    REGULAR = "regular"
    DOTS = "dots"
    DASHED = "dashed"
    ROUNDED = "rounded"
    FAT = "fat"
    FATDOTS = "fatdots"
    FATDASHED = "fatdashed"
    DOUBLE = "double"
    FAT_PLUS = "fat+"
    PIXEL = "pixel"


BORDER_STYLES = {
    BorderStyleName.SPACE:     BorderStyle(" ", " ", " ", " ", " ", " ", " ", " "),
    BorderStyleName.REGULAR:   BorderStyle("┌", "┐", "└", "┘", "─", "─", "│", "│"),
    BorderStyleName.DOTS:      BorderStyle("┌", "┐", "└", "┘", "┈", "┈", "┊", "┊"),
    BorderStyleName.DASHED:    BorderStyle("┌", "┐", "└", "┘", "╌", "╌", "╎", "╎"),
    BorderStyleName.ROUNDED:   BorderStyle("╭", "╮", "╰", "╯", "─", "─", "│", "│"),
    BorderStyleName.FAT:       BorderStyle("┏", "┓", "┗", "┛", "━", "━", "┃", "┃"),
    BorderStyleName.FATDOTS:   BorderStyle("┏", "┓", "┗", "┛", "┉", "┉", "┋", "┋"),
    BorderStyleName.FATDASHED: BorderStyle("┏", "┓", "┗", "┛", "╍", "╍", "╏", "╏"),
    BorderStyleName.DOUBLE:    BorderStyle("╔", "╗", "╚", "╝", "═", "═", "║", "║"),
    BorderStyleName.FAT_PLUS:  BorderStyle("▛", "▜", "▙", "▟", "▀", "▄", "▌", "▐"),
    BorderStyleName.PIXEL:     BorderStyle("▗", "▖", "▝", "▘", "▄", "▀", "▐", "▌"),
}

BorderStyleLike = Union[BorderStyleName, str, Sequence[str]]


def resolve_border_style(style: Optional[BorderStyleLike]) -> Optional[BorderStyle]:
    """
    Turn a preset name or glyph tuple into a BorderStyle.

    Names go through the fixed registry; an unknown name raises ValueError.
    Any other sequence is taken as eight glyphs.
    """
    if style is None:
        return None
    if isinstance(style, BorderStyle):
        return style
    if isinstance(style, str):
        return BORDER_STYLES[BorderStyleName(style)]
    return BorderStyle(*style)


def box_row(left: str, fill: str, right: str, width: int, color: Optional[Color]) -> str:
    """
    Create a box row with colored borders.

    Args:
        left: Left border character
        fill: Fill character (repeated)
        right: Right border character
        width: Total width including borders
        color: Palette color for the row, or None for plain glyphs

    Returns:
        Formatted string for the row
    """
    row = f"{left}{fill * max(width - 2, 0)}{right}"
    if color is None:
        return row
    return f"{color.fg}{row}{FG_OFF}"


def make_box(
    lines: Union[str, Sequence[Optional[str]]],
    style: BorderStyleLike = BorderStyleName.ROUNDED,
    color: Optional[ColorLike] = None,
) -> list[str]:
    """
    Frame lines in a border.

    Lines are padded on the right to the widest visible line; color codes
    already inside a line are kept and do not count towards its width.

    Args:
        lines: Lines to frame, or one string split on newlines
        style: Preset name or an 8-glyph BorderStyle
        color: Color for the border glyphs only

    Returns:
        Top row, one row per input line, bottom row
    """
    if isinstance(lines, str):
        lines = lines.split("\n")
    lines = [line or "" for line in lines]

    border = resolve_border_style(style)
    color = resolve_color(color)
    width = max((visible_width(line) for line in lines), default=0)

    if color is None:
        left, right = border.left, border.right
    else:
        left = f"{color.fg}{border.left}{FG_OFF}"
        right = f"{color.fg}{border.right}{FG_OFF}"

    out = [box_row(border.top_left, border.top, border.top_right, width + 2, color)]
    for line in lines:
        padding = " " * (width - visible_width(line))
        out.append(f"{left}{line}{padding}{right}")
    out.append(box_row(border.bottom_left, border.bottom, border.bottom_right, width + 2, color))

    return out
