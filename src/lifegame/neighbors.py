"""
Moore-neighborhood counting with a clamped (non-toroidal) boundary.

Positions outside the grid contribute nothing, so a corner cell has 3
neighbor positions, an edge cell 5 and an interior cell 8.
"""

import mlx.core as mx

# The 8 Moore offsets, (0, 0) excluded
OFFSETS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if not (dx == 0 and dy == 0)
)


def neighbor_positions(x: int, y: int, n: int) -> list[tuple[int, int]]:
    """Valid neighbor coordinates of (x, y) on an n x n grid."""
    positions = []
    for dx, dy in OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < n and 0 <= ny < n:
            positions.append((nx, ny))
    return positions


def count_neighbors(buffer, x: int, y: int, n: int) -> int:
    """
    Count live neighbors of cell (x, y).

    Args:
        buffer: n x n array indexable as buffer[x, y]
        x: Row of the cell
        y: Column of the cell
        n: Grid side

    Returns:
        Live neighbor count in [0, 8]
    """
    count = 0
    for nx, ny in neighbor_positions(x, y, n):
        value = buffer[nx, ny]
        count += int(value.item() if hasattr(value, "item") else value)
    return count


def pad_clamped(buffer: mx.array) -> mx.array:
    """Surround the grid with a one-cell ring of dead cells."""
    return mx.pad(buffer, [(1, 1), (1, 1)], constant_values=0)


def count_neighbors_block(
    padded: mx.array, x0: int, x1: int, y0: int, y1: int
) -> mx.array:
    """
    Neighbor counts for the block [x0:x1, y0:y1] of the unpadded grid.

    Args:
        padded: Grid padded by ``pad_clamped``
        x0, x1: Row range of the block (in unpadded coordinates)
        y0, y1: Column range of the block (in unpadded coordinates)

    Returns:
        Counts with shape (x1 - x0, y1 - y0)
    """
    counts = mx.zeros((x1 - x0, y1 - y0), dtype=mx.uint8)
    for dx, dy in OFFSETS:
        # Unpadded cell (x, y) lives at padded (x + 1, y + 1)
        counts = counts + padded[x0 + 1 + dx : x1 + 1 + dx, y0 + 1 + dy : y1 + 1 + dy]
    return counts


def count_neighbors_grid(buffer: mx.array) -> mx.array:
    """Neighbor counts for every cell of ``buffer``."""
    n = buffer.shape[0]
    return count_neighbors_block(pad_clamped(buffer.astype(mx.uint8)), 0, n, 0, n)
