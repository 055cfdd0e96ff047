"""
Tests for the vertical progress bar.

The bar fills from the bottom up; that is what separates it from a
transposed horizontal bar.
"""

import math

from unibar.config import VerticalOptions
from unibar.core.constants import FULL_BLOCK
from unibar.ui.colors import Color
from unibar.ui.components.vertical import center_in, color_rows, fill_column, vertical_bar


class TestFill:
    """Glyph selection, bottom-up."""

    def test_half_fills_lower_half(self):
        lines = vertical_bar(0.5, {"height": 8})
        assert lines[:4] == ["  "] * 4
        assert lines[4:] == ["██"] * 4

    def test_empty(self):
        assert vertical_bar(0, 4) == ["  "] * 4

    def test_full(self):
        assert vertical_bar(1, 3) == ["██"] * 3

    def test_partial_row_sits_on_top_of_full_rows(self):
        lines = vertical_bar(0.5625, {"height": 8, "bar_width": 1})
        assert lines == [" ", " ", " ", "▅", "█", "█", "█", "█"]

    def test_smallest_fill(self):
        assert fill_column(1 / 16, 8) == [" "] * 7 + ["▅"]
        assert fill_column(1 / 128, 8) == [" "] * 7 + ["▁"]

    def test_values_are_clamped(self):
        assert vertical_bar(-2, 3) == ["  "] * 3
        assert vertical_bar(5, 3) == ["██"] * 3

    def test_non_positive_height(self):
        assert vertical_bar(0.5, 0) == []
        assert vertical_bar(0.5, -3) == []
        assert fill_column(0.5, 0) == []

    def test_default_height(self):
        lines = vertical_bar(0.25)
        assert len(lines) == 40
        assert lines.count("██") == 10

    def test_filled_rows_never_decrease(self):
        previous = 0
        for step in range(101):
            column = fill_column(step / 100, 13)
            assert len(column) == 13
            filled = sum(1 for glyph in column if glyph != " ")
            assert filled >= previous
            # Filled rows are contiguous from the bottom
            assert column[len(column) - filled:] == [g for g in column if g != " "]
            previous = filled

    def test_full_blocks_at_bottom(self):
        column = fill_column(0.75, 8)
        assert column == [" "] * 2 + [FULL_BLOCK] * 6


class TestCentering:
    """Bar and label are centered in the inner width."""

    def test_extra_space_goes_left(self):
        assert center_in("█", 4) == "  █ "
        assert center_in("██", 4) == " ██ "

    def test_center_ignores_color_codes(self):
        assert center_in("\x1b[31mx\x1b[39m", 3) == " \x1b[31mx\x1b[39m "

    def test_wider_text_not_truncated(self):
        assert center_in("abcdef", 3) == "abcdef"

    def test_explicit_width(self):
        assert vertical_bar(1, {"height": 2, "width": 6}) == ["  ██  "] * 2


class TestLabel:
    """Label row appended below the bar."""

    def test_auto_percent_below_bar(self):
        assert vertical_bar(1, {"height": 4, "label": True}) == [" ██ ", " ██ ", " ██ ", "100%"]

    def test_label_counts_against_height(self):
        lines = vertical_bar(0.5, {"height": 9, "label": "x"})
        assert len(lines) == 9
        assert lines[-1] == " x"
        assert lines[4:8] == ["██"] * 4

    def test_label_color(self):
        lines = vertical_bar(0, {"height": 2, "bar_width": 1, "label": "a", "label_color": "green"})
        assert lines == [" ", "\x1b[32ma\x1b[39m"]

    def test_rows_share_width(self, widths):
        lines = vertical_bar(0.3, {"height": 12, "bar_width": 1, "label": True})
        assert set(widths(lines)) == {4}


class TestBorder:
    """Bars framed by make_box()."""

    def test_bordered_bar(self):
        assert vertical_bar(1, {"height": 4, "border_style": "regular"}) == [
            "┌──┐",
            "│██│",
            "│██│",
            "└──┘",
        ]

    def test_border_and_label(self):
        assert vertical_bar(0, {"height": 5, "border_style": "rounded", "label": "x"}) == [
            "╭──╮",
            "│  │",
            "│  │",
            "│ x│",
            "╰──╯",
        ]

    def test_explicit_width_includes_border(self, widths):
        lines = vertical_bar(0.5, {"height": 6, "width": 8, "border_style": "fat", "label": True})
        assert set(widths(lines)) == {8}
        assert lines[1] == "┃      ┃"
        assert lines[-2] == "┃  50% ┃"

    def test_border_color(self):
        lines = vertical_bar(1, {"height": 3, "bar_width": 1, "border_style": "regular", "border_color": "red"})
        assert lines[1] == "\x1b[31m│\x1b[39m█\x1b[31m│\x1b[39m"


class TestColorRows:
    """Color segments measured from the bottom."""

    def test_colors_counted_from_bottom(self):
        lines = vertical_bar(1, {
            "height": 4, "bar_width": 1,
            "bar_colors": [(0, "green"), (0.5, "red")],
        })
        assert lines == [
            "\x1b[31m█\x1b[39m",
            "\x1b[31m█\x1b[39m",
            "\x1b[32m█\x1b[39m",
            "\x1b[32m█\x1b[39m",
        ]

    def test_rows_below_first_stop_uncolored(self):
        rows = color_rows(["a", "b", "c", "d"], [(0.5, Color.BLUE)])
        assert rows == ["\x1b[34ma\x1b[39m", "\x1b[34mb\x1b[39m", "c", "d"]

    def test_no_stops(self):
        assert color_rows(["a", "b"], ()) == ["a", "b"]

    def test_non_finite_fractions_are_clamped(self):
        """NaN counts as the bottom row, infinity as the top."""
        red = "\x1b[31m█\x1b[39m"
        green = "\x1b[32m█\x1b[39m"
        nan_stop = vertical_bar(1, {
            "height": 4, "bar_width": 1,
            "bar_colors": [(0, "green"), (math.nan, "red")],
        })
        assert nan_stop == [red] * 4
        inf_stop = vertical_bar(1, {
            "height": 4, "bar_width": 1,
            "bar_colors": [(0, "green"), (math.inf, "red")],
        })
        assert inf_stop == [green] * 4

    def test_colors_do_not_change_width(self, widths):
        options = VerticalOptions(
            height=20, bar_width=4, label=True, border_style="double",
            bar_colors=tuple((i / 6, c) for i, c in enumerate(
                (Color.MAGENTA, Color.RED, Color.YELLOW, Color.GREEN, Color.CYAN, Color.BLUE)
            )),
        )
        for step in range(11):
            lines = vertical_bar(step / 10, options)
            assert len(lines) == 20
            assert set(widths(lines)) == {6}


class TestBackground:
    """Background applied to every row after the border."""

    def test_background_wraps_rows(self):
        lines = vertical_bar(1, {"height": 2, "bar_width": 1, "background_color": "blue"})
        assert lines == ["\x1b[44m█\x1b[49m"] * 2

    def test_label_restores_background(self):
        lines = vertical_bar(1, {
            "height": 2, "bar_width": 1, "label": "a",
            "label_color": "red", "background_color": "white",
        })
        assert lines[-1] == "\x1b[47m\x1b[31ma\x1b[39m\x1b[47m\x1b[49m"


class TestCallShapes:
    """Bare height, mapping and options object are interchangeable."""

    def test_shapes_agree(self):
        assert vertical_bar(0.4, 10) == vertical_bar(0.4, VerticalOptions(height=10))
        assert vertical_bar(0.4, {"height": 10, "barWidth": 3}) == vertical_bar(
            0.4, VerticalOptions(height=10, bar_width=3)
        )
