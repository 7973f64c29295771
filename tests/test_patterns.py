"""
Tests for named starting patterns.
"""

import pytest

from lifegame.errors import ConfigurationError
from lifegame.grid import live_cells
from lifegame.patterns import PATTERNS, pattern_cells, pattern_extent, place_pattern
from lifegame.scheduler import step


class TestPatterns:
    """Tests for pattern placement."""

    def test_extent(self):
        """Bounding boxes of the built-in patterns."""
        assert pattern_extent(PATTERNS["blinker"]) == (1, 3)
        assert pattern_extent(PATTERNS["glider"]) == (3, 3)
        assert pattern_extent(PATTERNS["beacon"]) == (4, 4)

    def test_origin(self):
        """Pattern offsets are applied from the origin."""
        state = place_pattern(6, "blinker", origin=(2, 1))
        assert live_cells(state) == {(2, 1), (2, 2), (2, 3)}

    def test_centered(self):
        """Without an origin the pattern is centered."""
        state = place_pattern(7, "block")
        assert live_cells(state) == {(2, 2), (2, 3), (3, 2), (3, 3)}

    def test_custom_pattern(self):
        """Offset sets can be passed directly."""
        cells = pattern_cells(4, frozenset({(0, 0), (3, 3)}), origin=(0, 0))
        assert cells.sum() == 2

    def test_unknown_pattern(self):
        """Unknown names are rejected."""
        with pytest.raises(ConfigurationError, match="unknown pattern"):
            place_pattern(8, "spaceship")

    def test_does_not_fit(self):
        """Patterns must fit inside the grid."""
        with pytest.raises(ConfigurationError, match="does not fit"):
            place_pattern(2, "glider")
        with pytest.raises(ConfigurationError):
            place_pattern(6, "blinker", origin=(0, 4))

    @pytest.mark.parametrize("name", ["blinker", "toad", "beacon"])
    def test_period_two_oscillators(self, name):
        """Oscillators return to their start after two ticks."""
        state = place_pattern(10, name)
        start = live_cells(state)

        step(state)
        assert live_cells(state) != start

        step(state)
        assert live_cells(state) == start
