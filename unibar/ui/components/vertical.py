"""
Vertical progress bar.

Grows from the bottom up. Shares label, border, color segment and
background handling with the horizontal bar.
"""

import math
from typing import Sequence, Union

from unibar.config import ColorStop, VerticalOptions, resolve_vertical_options
from unibar.core.constants import DEFAULT_HEIGHT, FULL_BLOCK, VERTICAL_EIGHTHS
from unibar.core.formatting import clamp_unit, format_percent, visible_width
from ..colors import BG_OFF, colorize, resolve_color
from .box import make_box, resolve_border_style


def fill_column(value: float, bar_height: int) -> list[str]:
    """Glyph per row, top to bottom: blanks, at most one partial glyph, full blocks."""
    if bar_height <= 0:
        return []
    if value == 1:
        return [FULL_BLOCK] * bar_height

    units = bar_height * value
    full = int(units)
    rem = units - full

    column = [" "] * (bar_height - math.ceil(units))
    if rem > 0:
        steps = len(VERTICAL_EIGHTHS)
        column.append(VERTICAL_EIGHTHS[min(int(rem * steps), steps - 1)])
    column.extend([FULL_BLOCK] * full)
    return column


def color_rows(rows: list[str], stops: Sequence[ColorStop]) -> list[str]:
    """
    Color bar rows by position counted from the bottom.

    Each stop's color starts at row floor(len(rows) * fraction) above the
    bottom and runs up to the next stop; rows below the first stop keep
    their plain glyphs.
    """
    if not stops:
        return rows

    count = len(rows)
    bounds = []
    cut = 0
    for fraction, color in stops:
        cut = min(max(math.floor(count * clamp_unit(fraction)), cut), count)
        bounds.append((cut, resolve_color(color)))

    colored = list(rows)
    for i, (start, color) in enumerate(bounds):
        end = bounds[i + 1][0] if i + 1 < len(bounds) else count
        for from_bottom in range(start, end):
            index = count - 1 - from_bottom
            colored[index] = colorize(rows[index], color)
    return colored


def center_in(text: str, width: int) -> str:
    """Center text in width columns, with the extra space on the left."""
    text_width = visible_width(text)
    left = max(math.ceil((width - text_width) / 2), 0)
    right = max(width - text_width - left, 0)
    return f"{' ' * left}{text}{' ' * right}"


def vertical_bar(
    value: float,
    height_or_options: Union[int, dict, VerticalOptions] = DEFAULT_HEIGHT,
) -> list[str]:
    """
    Render a vertical progress bar.

    Args:
        value: Progress, clamped to [0, 1]
        height_or_options: Total height, an options mapping, or VerticalOptions

    Returns:
        Rows of equal visible width, label row (if any) last
    """
    options = resolve_vertical_options(height_or_options)
    border = resolve_border_style(options.border_style)
    background = resolve_color(options.background_color)
    value = clamp_unit(value)

    label = options.label
    if label is True:
        label = format_percent(value)
    elif label is False:
        label = None

    bar_height = options.height
    if border:
        bar_height -= 2
    if label is not None:
        bar_height -= 1

    bar_width = max(options.bar_width, 0)
    if options.width is not None:
        inner_width = options.width - 2 if border else options.width
    else:
        inner_width = max(bar_width, visible_width(label) if label is not None else 0)

    rows = [glyph * bar_width for glyph in fill_column(value, bar_height)]
    rows = color_rows(rows, options.bar_colors)
    lines = [center_in(row, inner_width) for row in rows]

    if label is not None:
        label = colorize(label, resolve_color(options.label_color))
        if background is not None:
            label += background.bg
        lines.append(center_in(label, inner_width))

    if border:
        lines = make_box(lines, border, options.border_color)

    if background is not None:
        lines = [f"{background.bg}{line}{BG_OFF}" for line in lines]

    return lines
