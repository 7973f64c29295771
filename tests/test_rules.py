"""
Tests for the B3/S23 transition rule.
"""

import mlx.core as mx
import numpy as np
import pytest

from lifegame.rules import next_value, next_values


class TestNextValue:
    """Tests for the scalar rule."""

    @pytest.mark.parametrize("count", [0, 1])
    def test_underpopulation(self, count):
        """Live cell with fewer than 2 neighbors dies."""
        assert next_value(1, count) == 0

    @pytest.mark.parametrize("count", [4, 5, 6, 7, 8])
    def test_overpopulation(self, count):
        """Live cell with more than 3 neighbors dies."""
        assert next_value(1, count) == 0

    @pytest.mark.parametrize("count", [2, 3])
    def test_survival(self, count):
        """Live cell with 2 or 3 neighbors survives."""
        assert next_value(1, count) == 1

    def test_birth(self):
        """Dead cell with exactly 3 neighbors is born."""
        assert next_value(0, 3) == 1

    @pytest.mark.parametrize("count", [0, 1, 2, 4, 5, 6, 7, 8])
    def test_stays_dead(self, count):
        """Dead cell without exactly 3 neighbors stays dead."""
        assert next_value(0, count) == 0

    def test_purity(self):
        """Same arguments, same result."""
        for current in (0, 1):
            for count in range(9):
                assert next_value(current, count) == next_value(current, count)


class TestNextValues:
    """Tests for the element-wise rule."""

    def test_matches_scalar(self):
        """Batched rule agrees with the scalar rule on the whole table."""
        current = mx.array([0] * 9 + [1] * 9, dtype=mx.uint8)
        counts = mx.array(list(range(9)) * 2, dtype=mx.uint8)

        result = np.array(next_values(current, counts))
        expected = [next_value(c, k) for c in (0, 1) for k in range(9)]

        assert result.tolist() == expected

    def test_output_dtype(self):
        """Batched output is uint8."""
        result = next_values(mx.zeros((2, 2), dtype=mx.uint8), mx.zeros((2, 2), dtype=mx.uint8))
        assert result.dtype == mx.uint8
