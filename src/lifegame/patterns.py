"""
Named starting patterns.

Patterns are sets of live (x, y) offsets relative to their top-left corner.
"""

from typing import Optional, Union

import numpy as np

from .errors import ConfigurationError
from .grid import GridState

Pattern = frozenset[tuple[int, int]]

PATTERNS: dict[str, Pattern] = {
    # Still life
    "block": frozenset({(0, 0), (0, 1), (1, 0), (1, 1)}),
    # Period-2 oscillators
    "blinker": frozenset({(0, 0), (0, 1), (0, 2)}),
    "toad": frozenset({(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)}),
    "beacon": frozenset({(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)}),
    # Spaceship, moves one cell diagonally every 4 ticks
    "glider": frozenset({(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)}),
}


def pattern_extent(pattern: Pattern) -> tuple[int, int]:
    """Bounding box (rows, columns) of a pattern."""
    return (
        max(x for x, _ in pattern) + 1,
        max(y for _, y in pattern) + 1,
    )


def pattern_cells(
    n: int,
    pattern: Union[str, Pattern],
    origin: Optional[tuple[int, int]] = None,
) -> np.ndarray:
    """
    Render a pattern into an n x n 0/1 array.

    Args:
        n: Grid side
        pattern: Pattern name from PATTERNS or a set of offsets
        origin: Top-left cell of the pattern (None = centered)

    Returns:
        uint8 array with the pattern's cells set to 1
    """
    if isinstance(pattern, str):
        if pattern not in PATTERNS:
            raise ConfigurationError(
                f"unknown pattern {pattern!r}, expected one of {sorted(PATTERNS)}"
            )
        pattern = PATTERNS[pattern]

    rows, cols = pattern_extent(pattern)
    if origin is None:
        origin = ((n - rows) // 2, (n - cols) // 2)
    ox, oy = origin

    if ox < 0 or oy < 0 or ox + rows > n or oy + cols > n:
        raise ConfigurationError(
            f"pattern of extent {rows}x{cols} at {origin} does not fit a grid of size {n}"
        )

    cells = np.zeros((n, n), dtype=np.uint8)
    for dx, dy in pattern:
        cells[ox + dx, oy + dy] = 1
    return cells


def place_pattern(
    n: int,
    pattern: Union[str, Pattern],
    origin: Optional[tuple[int, int]] = None,
) -> GridState:
    """Create a tick-0 GridState holding only ``pattern``."""
    return GridState.from_cells(pattern_cells(n, pattern, origin))
