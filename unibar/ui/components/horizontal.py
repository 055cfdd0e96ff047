"""
Horizontal progress bar.

Fills left to right with eighth-cell precision, optionally with a percent
or text label, a border, colored segments, and a background.
"""

import math
from typing import Sequence, Union

from unibar.config import ColorStop, HorizontalOptions, resolve_horizontal_options
from unibar.core.constants import DEFAULT_WIDTH, FULL_BLOCK, HORIZONTAL_EIGHTHS
from unibar.core.formatting import clamp_unit, format_percent, visible_width
from ..colors import BG_OFF, FG_OFF, colorize, resolve_color
from .box import make_box, resolve_border_style


def fill_row(value: float, bar_width: int) -> str:
    """
    Bar glyphs for a clamped value, right-padded to bar_width.

    At most one partial glyph follows the full blocks.
    """
    if bar_width <= 0:
        return ""
    if value == 1:
        return FULL_BLOCK * bar_width

    units = bar_width * value
    full = int(units)
    rem = units - full
    bar = FULL_BLOCK * full
    if rem > 0:
        steps = len(HORIZONTAL_EIGHTHS)
        bar += HORIZONTAL_EIGHTHS[min(int(rem * steps), steps - 1)]
    return bar.ljust(bar_width)


def color_segments(bar: str, bar_width: int, stops: Sequence[ColorStop]) -> str:
    """
    Insert color codes into a bar row.

    Each stop's color starts at column floor(bar_width * fraction) and runs
    until the next stop; the row ends with the default-foreground reset.
    """
    if not stops:
        return bar

    parts = []
    cut = 0
    for fraction, color in stops:
        next_cut = min(max(math.floor(bar_width * clamp_unit(fraction)), cut), max(bar_width, 0))
        parts.append(bar[cut:next_cut])
        parts.append(resolve_color(color).fg)
        cut = next_cut
    parts.append(bar[cut:])
    parts.append(FG_OFF)
    return "".join(parts)


def horizontal_bar(
    value: float,
    width_or_options: Union[int, dict, HorizontalOptions] = DEFAULT_WIDTH,
) -> list[str]:
    """
    Render a horizontal progress bar.

    Args:
        value: Progress, clamped to [0, 1]
        width_or_options: Total width, an options mapping, or HorizontalOptions

    Returns:
        Rows of equal visible width (no trailing newlines)
    """
    options = resolve_horizontal_options(width_or_options)
    border = resolve_border_style(options.border_style)
    background = resolve_color(options.background_color)
    value = clamp_unit(value)

    height = options.height if options.height is not None else (3 if border else 1)
    rows = height - 2 if border else height

    label = options.label
    if label is True:
        label = format_percent(value)
    elif label is False:
        label = None

    bar_width = options.width
    if label is not None:
        bar_width -= visible_width(label) + 1
    if border:
        bar_width -= 2

    bar = color_segments(fill_row(value, bar_width), bar_width, options.bar_colors)

    lines = [bar] * max(rows, 0)
    if label is not None and lines:
        # Rows without the label are blank where the label sits
        lines = [bar + " " * (visible_width(label) + 1)] * len(lines)
        label = colorize(label, resolve_color(options.label_color))
        if background is not None:
            label += background.bg
        lines[len(lines) >> 1] = f"{bar} {label}"

    if border:
        lines = make_box(lines, border, options.border_color)

    if background is not None:
        lines = [f"{background.bg}{line}{BG_OFF}" for line in lines]

    return lines
