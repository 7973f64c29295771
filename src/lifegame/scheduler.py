"""
One synchronous whole-grid update.

Update order (critical for synchronous semantics):
    1. Freeze the current buffer (tick % 2)
    2. Build neighbor counts and next values for every tile, reading only
       the frozen buffer
    3. Evaluate all tiles in a single dispatch
    4. Write each tile into its disjoint region of the next buffer
    5. Commit the swap

A failure anywhere in 2-4 aborts the step before the swap, so the
previous buffer stays current.
"""

from typing import Iterator, Optional

import mlx.core as mx

from .errors import ConfigurationError, LifeGameError, StepFault
from .grid import GridState
from .neighbors import count_neighbors_block, pad_clamped
from .rules import next_values

Tile = tuple[int, int, int, int]


class StepScheduler:
    """
    Splits the n x n index space into square tiles and advances a GridState.

    Attributes:
        tile_size: Side of each tile (the last row/column of tiles may be smaller)
    """

    def __init__(self, tile_size: int = 16):
        if tile_size <= 0:
            raise ConfigurationError(f"tile_size must be > 0, got {tile_size}")
        self.tile_size = tile_size

    def tiles(self, n: int) -> Iterator[Tile]:
        """Yield (x0, x1, y0, y1) tiles covering an n x n grid exactly once."""
        t = self.tile_size
        for x0 in range(0, n, t):
            for y0 in range(0, n, t):
                yield x0, min(x0 + t, n), y0, min(y0 + t, n)

    def compute_tile(self, frozen: mx.array, padded: mx.array, tile: Tile) -> mx.array:
        """Next values for one tile (lazy, not yet evaluated)."""
        x0, x1, y0, y1 = tile
        counts = count_neighbors_block(padded, x0, x1, y0, y1)
        return next_values(frozen[x0:x1, y0:y1], counts)

    def step(self, state: GridState) -> None:
        """
        Advance ``state`` by one tick.

        Raises:
            StepFault: If computing the next buffer fails; the tick is unchanged
        """
        frozen = state.buffer(state.current_index())

        try:
            padded = pad_clamped(frozen)
            tiles = list(self.tiles(state.size))
            blocks = [self.compute_tile(frozen, padded, tile) for tile in tiles]
            mx.eval(*blocks)

            for (x0, _, y0, _), block in zip(tiles, blocks):
                state.write_block(x0, y0, block)
        except LifeGameError:
            state.abort_step()
            raise
        except Exception as exc:
            state.abort_step()
            raise StepFault(f"step from tick {state.tick} failed: {exc}") from exc

        state.commit_swap()


_default_scheduler = StepScheduler()


def step(state: GridState, scheduler: Optional[StepScheduler] = None) -> None:
    """Advance ``state`` by one tick using ``scheduler`` (16x16 tiles by default)."""
    (scheduler or _default_scheduler).step(state)
