"""
Layout helpers for placing rendered blocks on screen.
"""

from typing import Sequence, Union

from unibar.core.formatting import pad_visible, visible_width

Block = Union[str, Sequence[str]]


def _as_lines(block: Block) -> list[str]:
    if isinstance(block, str):
        return block.split("\n")
    return list(block)


def center_box(text: Block, width: int, height: int) -> list[str]:
    """
    Offset a block towards the middle of a width x height area.

    Lines are shifted right and down by half the free space. Nothing is
    added below the block and oversized content is not truncated.
    """
    lines = _as_lines(text)
    max_width = max((visible_width(line) for line in lines), default=0)
    prefix = " " * max((width - max_width) // 2, 0)

    box = [""] * max((height - len(lines)) // 2, 0)
    box.extend(prefix + line for line in lines)
    return box


def vertical_join(*blocks: Block) -> list[str]:
    """
    Place blocks side by side, left to right.

    Each block is padded to its own widest line; shorter blocks are filled
    with blank rows so every output row has the same visible width.
    """
    rows: list[list[str]] = []
    width = 0
    for block in blocks:
        lines = _as_lines(block)
        block_width = max((visible_width(line) for line in lines), default=0)

        pad_line = " " * width
        while len(rows) < len(lines):
            rows.append([pad_line])

        for index, line in enumerate(lines):
            rows[index].append(pad_visible(line, block_width))

        pad_line = " " * block_width
        for index in range(len(lines), len(rows)):
            rows[index].append(pad_line)

        width += block_width

    return ["".join(parts) for parts in rows]
