"""
Shared constants for unibar.
"""

# Glyph for a completely filled cell
FULL_BLOCK = "█"

# Left-to-right partial cells, one per eighth (1/8 .. 8/8)
HORIZONTAL_EIGHTHS = (
    "▏",  # 1/8
    "▎",  # 1/4
    "▍",  # 3/8
    "▌",  # 1/2
    "▋",  # 5/8
    "▊",  # 3/4
    "▉",  # 7/8
    "█",  # 1/1
)

# Bottom-to-top partial cells, one per eighth (1/8 .. 8/8)
VERTICAL_EIGHTHS = (
    "▁",  # 1/8
    "▂",  # 1/4
    "▃",  # 3/8
    "▄",  # 1/2
    "▅",  # 5/8
    "▆",  # 3/4
    "▇",  # 7/8
    "█",  # 1/1
)

# Renderer defaults
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 40
DEFAULT_VERTICAL_BAR_WIDTH = 2

# Width of the automatic percent label (" 42%", "100%")
PERCENT_LABEL_WIDTH = 4
