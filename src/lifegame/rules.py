"""
B3/S23 transition rule.

- Live cell with 2 or 3 live neighbors survives, otherwise dies
- Dead cell with exactly 3 live neighbors is born, otherwise stays dead
"""

import mlx.core as mx

BIRTH = frozenset({3})
SURVIVAL = frozenset({2, 3})


def next_value(current: int, neighbor_count: int) -> int:
    """
    Next state of a single cell.

    Args:
        current: Current cell value (0 or 1)
        neighbor_count: Live neighbors in [0, 8]

    Returns:
        1 if the cell is alive next tick, else 0
    """
    if current == 1:
        return 1 if neighbor_count in SURVIVAL else 0
    return 1 if neighbor_count in BIRTH else 0


def next_values(current: mx.array, counts: mx.array) -> mx.array:
    """
    Element-wise ``next_value`` over a block of cells.

    Args:
        current: Block of current values (0/1)
        counts: Neighbor counts, same shape as ``current``

    Returns:
        uint8 block of next values
    """
    survives = (current == 1) & ((counts == 2) | (counts == 3))
    born = (current == 0) & (counts == 3)
    return (survives | born).astype(mx.uint8)
