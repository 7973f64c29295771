"""
Tests for the step scheduler.
"""

import mlx.core as mx
import numpy as np
import pytest

from lifegame.errors import ConfigurationError, PreconditionViolation, StepFault
from lifegame.grid import GridState, live_cells, read_current
from lifegame.neighbors import count_neighbors
from lifegame.patterns import place_pattern
from lifegame.rules import next_value
from lifegame.scheduler import StepScheduler, step


def reference_step(cells: np.ndarray) -> np.ndarray:
    """Cell-by-cell update used as ground truth."""
    n = cells.shape[0]
    result = np.zeros_like(cells)
    for x in range(n):
        for y in range(n):
            result[x, y] = next_value(int(cells[x, y]), count_neighbors(cells, x, y, n))
    return result


class FaultyScheduler(StepScheduler):
    """Raises while computing the tile with index ``fail_at``."""

    def __init__(self, fail_at: int, tile_size: int = 2):
        super().__init__(tile_size)
        self.fail_at = fail_at
        self.calls = 0

    def compute_tile(self, frozen, padded, tile):
        if self.calls == self.fail_at:
            raise MemoryError("out of tile memory")
        self.calls += 1
        return super().compute_tile(frozen, padded, tile)


class CorruptScheduler(StepScheduler):
    """Produces an invalid block for the last tile, after earlier tiles were written."""

    def compute_tile(self, frozen, padded, tile):
        x0, x1, y0, y1 = tile
        block = super().compute_tile(frozen, padded, tile)
        if x1 == frozen.shape[0] and y1 == frozen.shape[1]:
            return mx.full(block.shape, 2, dtype=mx.uint8)
        return block


class TestTiles:
    """Tests for index-space tiling."""

    def test_invalid_tile_size(self):
        """Tile size must be positive."""
        with pytest.raises(ConfigurationError):
            StepScheduler(tile_size=0)

    @pytest.mark.parametrize("n,tile_size", [(10, 4), (16, 16), (5, 8), (1, 16)])
    def test_tiles_cover_grid_once(self, n, tile_size):
        """Tiles partition the index space."""
        coverage = np.zeros((n, n), dtype=int)
        for x0, x1, y0, y1 in StepScheduler(tile_size).tiles(n):
            coverage[x0:x1, y0:y1] += 1

        assert (coverage == 1).all()


class TestStep:
    """Tests for whole-grid updates."""

    def test_blinker_oscillates(self, blinker_state):
        """Horizontal blinker turns vertical and back."""
        step(blinker_state)
        assert live_cells(blinker_state) == {(1, 2), (2, 2), (3, 2)}
        assert blinker_state.tick == 1

        step(blinker_state)
        assert live_cells(blinker_state) == {(2, 1), (2, 2), (2, 3)}
        assert blinker_state.tick == 2

    def test_all_dead_is_stable(self, empty_state):
        """An empty grid stays empty."""
        for _ in range(5):
            step(empty_state)

        assert read_current(empty_state).sum() == 0
        assert empty_state.tick == 5

    def test_block_is_still_life(self):
        """A 2x2 block never changes."""
        state = place_pattern(6, "block")
        before = read_current(state).copy()

        for _ in range(3):
            step(state)

        assert np.array_equal(read_current(state), before)

    def test_block_in_corner(self):
        """Clamping does not disturb a block touching the corner."""
        state = place_pattern(4, "block", origin=(0, 0))
        step(state)

        assert live_cells(state) == {(0, 0), (0, 1), (1, 0), (1, 1)}

    def test_glider_translates(self):
        """After 4 ticks a glider moves one cell diagonally."""
        state = place_pattern(12, "glider", origin=(1, 1))
        start = live_cells(state)

        for _ in range(4):
            step(state)

        assert live_cells(state) == {(x + 1, y + 1) for x, y in start}

    def test_matches_reference(self, random_state):
        """Batched step equals the cell-by-cell update."""
        cells = read_current(random_state).copy()

        for _ in range(3):
            step(random_state)
            cells = reference_step(cells)
            assert np.array_equal(read_current(random_state), cells)

    @pytest.mark.parametrize("tile_size", [3, 7, 64])
    def test_tile_size_does_not_change_result(self, random_state, tile_size):
        """Tiling is an execution detail only."""
        cells = read_current(random_state)
        tiled = GridState.from_cells(cells)
        baseline = GridState.from_cells(cells)

        for _ in range(3):
            StepScheduler(tile_size).step(tiled)
            StepScheduler(16).step(baseline)

        assert np.array_equal(read_current(tiled), read_current(baseline))

    def test_edge_cells_use_clamped_boundary(self):
        """A line along the top edge dies and grows only inward."""
        state = GridState.from_cells(
            [
                [1, 1, 1, 0],
                [0, 0, 0, 0],
                [0, 0, 0, 0],
                [0, 0, 0, 0],
            ]
        )
        step(state)

        # Toroidal wrap would also give birth to (3, 1)
        assert live_cells(state) == {(0, 1), (1, 1)}


class TestFailAtomicity:
    """Tests for failed steps."""

    def test_fault_leaves_current_buffer(self, random_state):
        """A faulting step commits nothing."""
        before_cells = read_current(random_state).copy()
        before_index = random_state.current_index()

        with pytest.raises(StepFault) as excinfo:
            FaultyScheduler(fail_at=3).step(random_state)

        assert isinstance(excinfo.value.__cause__, MemoryError)
        assert random_state.current_index() == before_index
        assert random_state.tick == 0
        assert np.array_equal(read_current(random_state), before_cells)

    def test_step_after_fault(self, blinker_state):
        """The state is usable again after a failed step."""
        with pytest.raises(StepFault):
            FaultyScheduler(fail_at=0).step(blinker_state)

        step(blinker_state)
        assert live_cells(blinker_state) == {(1, 2), (2, 2), (3, 2)}

    def test_fault_after_partial_writes(self, blinker_state):
        """A bad block after earlier writes still leaves the tick unchanged."""
        with pytest.raises(PreconditionViolation):
            CorruptScheduler(tile_size=3).step(blinker_state)

        assert blinker_state.tick == 0
        assert live_cells(blinker_state) == {(2, 1), (2, 2), (2, 3)}

        step(blinker_state)
        assert blinker_state.tick == 1
