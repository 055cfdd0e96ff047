"""
unibar - Unicode progress bars for text terminals.

Renders horizontal and vertical progress bars with eighth-cell precision,
optional borders, percent labels and ANSI colors. Every renderer returns a
list of lines and has no side effects.

    from unibar import horizontal_bar, vertical_bar, make_box

    print("\\n".join(horizontal_bar(0.42, {"width": 40, "label": True})))
"""

# Components first: the renderers import unibar.config, which needs the box module loaded
from .ui.components import (
    BorderStyle,
    BorderStyleName,
    BORDER_STYLES,
    make_box,
    horizontal_bar,
    vertical_bar,
    center_box,
    vertical_join,
)
from .ui.colors import Color
from .core.formatting import visible_width, strip_ansi
from .config import HorizontalOptions, VerticalOptions, InvalidOptionError


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()

__all__ = [
    "BorderStyle",
    "BorderStyleName",
    "BORDER_STYLES",
    "Color",
    "HorizontalOptions",
    "VerticalOptions",
    "InvalidOptionError",
    "make_box",
    "horizontal_bar",
    "vertical_bar",
    "center_box",
    "vertical_join",
    "visible_width",
    "strip_ansi",
    "__version__",
]
