"""
Double-buffered grid state for the life-game simulation.

The state consists of:
- Two n x n cell buffers holding 0 (dead) or 1 (alive)
- A tick counter selecting which buffer is current (tick % 2)

Cells are addressed as (x, y) with row-major layout, i.e. buffer[x, y]
corresponds to flat index x * n + y.
"""

from typing import Callable, Optional

import mlx.core as mx
import numpy as np

from .errors import CellIndexError, ConfigurationError, PreconditionViolation

CELL_DTYPE = mx.uint8

SeedSource = Callable[[], int]


class GridState:
    """
    Ping-pong pair of cell buffers plus the tick counter.

    The buffer at ``current_index()`` is frozen for the duration of a step;
    the buffer at ``next_index()`` only receives writes through
    ``write_block`` and becomes current once ``commit_swap`` runs.

    Attributes:
        size: Grid side n (fixed for the lifetime of the state)
        tick: Number of committed steps
    """

    def __init__(self, buffers: list[mx.array], tick: int = 0):
        if len(buffers) != 2:
            raise ConfigurationError(f"GridState needs exactly 2 buffers, got {len(buffers)}")
        if len(buffers[0].shape) != 2 or buffers[0].shape[0] != buffers[0].shape[1]:
            raise ConfigurationError(f"buffers must be square 2D arrays, got {buffers[0].shape}")
        if buffers[0].shape != buffers[1].shape:
            raise ConfigurationError(
                f"buffer shapes differ: {buffers[0].shape} vs {buffers[1].shape}"
            )
        if tick < 0:
            raise ConfigurationError(f"tick must be >= 0, got {tick}")

        self._buffers = [b.astype(CELL_DTYPE) for b in buffers]
        self._size = buffers[0].shape[0]
        self._tick = tick
        # Cells of the next buffer written during the in-progress step
        self._written = np.zeros((self._size, self._size), dtype=bool)
        # Non-current buffer still holds tick - 1 (cleared by any write)
        self._previous_intact = False

    @property
    def size(self) -> int:
        return self._size

    @property
    def previous_intact(self) -> bool:
        """True when the non-current buffer holds the untouched previous tick."""
        return self._previous_intact

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def shape(self) -> tuple[int, int]:
        """Grid dimensions (n, n)."""
        return (self._size, self._size)

    def current_index(self) -> int:
        return self._tick % 2

    def next_index(self) -> int:
        return (self._tick + 1) % 2

    def buffer(self, buffer_index: int) -> mx.array:
        """Return the raw buffer at ``buffer_index`` (0 or 1)."""
        if buffer_index not in (0, 1):
            raise CellIndexError(f"buffer_index must be 0 or 1, got {buffer_index}")
        return self._buffers[buffer_index]

    def get(self, buffer_index: int, x: int, y: int) -> int:
        """
        Read a single cell.

        Raises:
            CellIndexError: If the buffer index or (x, y) is out of range
        """
        buf = self.buffer(buffer_index)
        n = self._size
        if not (0 <= x < n and 0 <= y < n):
            raise CellIndexError(f"cell ({x}, {y}) outside grid of size {n}")
        return int(buf[x, y].item())

    def write_block(self, x0: int, y0: int, block: mx.array) -> None:
        """
        Write a block of next values into the next buffer.

        Blocks written during one step must cover disjoint cells.

        Args:
            x0: Row of the block's top-left cell
            y0: Column of the block's top-left cell
            block: 2D array of 0/1 values
        """
        if block.ndim != 2:
            raise PreconditionViolation(f"block must be 2D, got shape {block.shape}")

        h, w = block.shape
        x1, y1 = x0 + h, y0 + w
        n = self._size
        if x0 < 0 or y0 < 0 or x1 > n or y1 > n:
            raise CellIndexError(
                f"block [{x0}:{x1}, {y0}:{y1}] outside grid of size {n}"
            )
        if self._written[x0:x1, y0:y1].any():
            raise PreconditionViolation(
                f"block [{x0}:{x1}, {y0}:{y1}] overlaps cells already written this step"
            )
        if block.size and mx.max(block).item() > 1:
            raise PreconditionViolation("block contains values outside {0, 1}")

        nxt = self._buffers[self.next_index()]
        nxt[x0:x1, y0:y1] = block.astype(CELL_DTYPE)
        self._written[x0:x1, y0:y1] = True
        self._previous_intact = False

    def commit_swap(self) -> None:
        """
        Make the next buffer current by advancing the tick.

        Raises:
            PreconditionViolation: If any cell of the next buffer is unwritten
        """
        if not self._written.all():
            missing = int(self._written.size - np.count_nonzero(self._written))
            raise PreconditionViolation(
                f"commit_swap called with {missing} of {self._written.size} cells unwritten"
            )
        mx.eval(self._buffers[self.next_index()])
        self._tick += 1
        self._written[:] = False
        self._previous_intact = True

    def abort_step(self) -> None:
        """Forget partial writes of an in-progress step; the tick is unchanged."""
        self._written[:] = False

    def read_current(self) -> np.ndarray:
        """Read-only n x n copy of the committed current buffer."""
        view = np.array(self._buffers[self.current_index()], dtype=np.uint8)
        view.setflags(write=False)
        return view

    @classmethod
    def from_cells(cls, cells) -> "GridState":
        """
        Create a state whose tick-0 buffer holds ``cells``.

        Args:
            cells: Square 2D array-like of 0/1 values

        Returns:
            GridState at tick 0
        """
        arr = np.asarray(cells)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] == 0:
            raise ConfigurationError(f"cells must be a non-empty square 2D array, got {arr.shape}")
        if not np.isin(arr, (0, 1)).all():
            raise ConfigurationError("cells must only contain 0 or 1")

        n = arr.shape[0]
        current = mx.array(arr.astype(np.uint8))
        return cls([current, mx.zeros((n, n), dtype=CELL_DTYPE)])

    def __repr__(self) -> str:
        return f"GridState(size={self._size}, tick={self._tick})"


def initialize(n: int, seed_source: SeedSource) -> GridState:
    """
    Create a GridState of side ``n`` seeded one cell at a time.

    Args:
        n: Grid side, must be a positive integer
        seed_source: Callable returning 0 or 1, sampled once per cell

    Returns:
        GridState at tick 0

    Raises:
        ConfigurationError: If n <= 0 or the seed source yields other values
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ConfigurationError(f"grid size must be an integer, got {n!r}")
    if n <= 0:
        raise ConfigurationError(f"grid size must be > 0, got {n}")

    cells = np.empty(n * n, dtype=np.uint8)
    for i in range(n * n):
        value = seed_source()
        if value not in (0, 1):
            raise ConfigurationError(f"seed source produced {value!r}, expected 0 or 1")
        cells[i] = value

    current = mx.array(cells.reshape(n, n))
    return GridState([current, mx.zeros((n, n), dtype=CELL_DTYPE)])


def read_current(state: GridState) -> np.ndarray:
    """Read-only view of the buffer selected by ``state.current_index()``."""
    return state.read_current()


def live_cells(state: GridState, buffer_index: Optional[int] = None) -> set[tuple[int, int]]:
    """
    Coordinates of live cells.

    Args:
        state: Grid state
        buffer_index: Buffer to inspect (defaults to the current buffer)
    """
    if buffer_index is None:
        buffer_index = state.current_index()
    cells = np.array(state.buffer(buffer_index))
    return {(int(x), int(y)) for x, y in zip(*np.nonzero(cells))}
