"""Pytest configuration and fixtures."""

import pytest

from unibar.core.formatting import visible_width


@pytest.fixture
def widths():
    """Visible width of every rendered row."""
    def _widths(lines):
        return [visible_width(line) for line in lines]
    return _widths
