"""
Tests for text measurement helpers.

Tests visible_width(), strip_ansi(), pad_visible(), clamp_unit() and
format_percent().
"""

import math

from unibar.core.formatting import (
    clamp_unit,
    format_percent,
    pad_visible,
    strip_ansi,
    visible_width,
)


class TestVisibleWidth:
    """Tests for visible_width() - columns a string takes on screen."""

    def test_plain_text(self):
        assert visible_width("hello") == 5
        assert visible_width("") == 0

    def test_color_pair_not_counted(self):
        """A color on/off pair takes no columns."""
        assert visible_width("\x1b[31mhi\x1b[39m") == 2

    def test_multi_parameter_sequences(self):
        assert visible_width("\x1b[38;2;10;20;30mX\x1b[0m") == 1
        assert visible_width("\x1b[1;31mbold\x1b[22;39m") == 4
        assert visible_width("\x1b[1;38;2;10;20;30mX\x1b[m") == 1

    def test_zero_width_characters(self):
        """Zero-width space, joiners, word joiner and BOM take no columns."""
        assert visible_width("a\U0000200bb") == 2
        assert visible_width("a\U0000200db") == 2
        assert visible_width("a\U00002060b") == 2
        assert visible_width("\U0000feffx") == 1

    def test_combining_marks(self):
        """A base letter plus combining accent is one column."""
        assert visible_width("e\U00000301") == 1
        assert visible_width("a\U000020d7") == 1

    def test_private_use_glyphs(self):
        """Private use code points (icon fonts) are not counted."""
        assert visible_width("\U0000e0b0") == 0
        assert visible_width("x\U000f0001") == 1

    def test_block_glyphs_count_once(self):
        assert visible_width("█▌▏") == 3
        assert visible_width("╭──╮") == 4


class TestStripAnsi:
    """Tests for strip_ansi()."""

    def test_removes_color_codes(self):
        assert strip_ansi("\x1b[32mok\x1b[39m done") == "ok done"

    def test_leaves_zero_width_characters(self):
        assert strip_ansi("a\U0000200bb") == "a\U0000200bb"


class TestPadVisible:
    """Tests for pad_visible()."""

    def test_pads_by_visible_width(self):
        text = "\x1b[31mab\x1b[39m"
        assert pad_visible(text, 4) == text + "  "

    def test_never_truncates(self):
        assert pad_visible("abcdef", 3) == "abcdef"


class TestClampUnit:
    """Tests for clamp_unit()."""

    def test_inside_range_unchanged(self):
        assert clamp_unit(0.3) == 0.3
        assert clamp_unit(0) == 0.0
        assert clamp_unit(1) == 1.0

    def test_below_zero(self):
        assert clamp_unit(-0.5) == 0.0

    def test_above_one(self):
        assert clamp_unit(1.5) == 1.0
        assert clamp_unit(math.inf) == 1.0

    def test_nan_is_zero(self):
        assert clamp_unit(math.nan) == 0.0


class TestFormatPercent:
    """Tests for format_percent() - automatic bar labels."""

    def test_padded_to_four_columns(self):
        assert format_percent(0.42) == " 42%"
        assert format_percent(0) == "  0%"

    def test_full(self):
        assert format_percent(1.0) == "100%"

    def test_rounds_to_nearest(self):
        assert format_percent(0.999) == "100%"
        assert format_percent(0.126) == " 13%"
        assert format_percent(0.124) == " 12%"
