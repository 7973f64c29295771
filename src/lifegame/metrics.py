"""
Metrics and analysis utilities for the life-game simulation.

All metrics read committed buffers only.
"""

from typing import Optional

import mlx.core as mx
import numpy as np

from .grid import GridState


def population(state: GridState) -> int:
    """
    Number of live cells in the current buffer.

    Args:
        state: Grid state

    Returns:
        Live cell count
    """
    return int(mx.sum(state.buffer(state.current_index()).astype(mx.uint32)).item())


def density(state: GridState) -> float:
    """Fraction of live cells in the current buffer."""
    n = state.size
    return population(state) / (n * n)


def transitions(state: GridState) -> Optional[dict[str, int]]:
    """
    Births and deaths of the latest committed step.

    After a swap the non-current buffer still holds the previous tick, so
    both ticks can be compared without keeping history. At tick 0 there is
    no previous tick and both counts are 0.

    Args:
        state: Grid state

    Returns:
        Dictionary with births and deaths, or None once the previous tick
        has been overwritten (e.g. by an aborted step)
    """
    if state.tick == 0:
        return {"births": 0, "deaths": 0}
    if not state.previous_intact:
        return None

    current = state.buffer(state.current_index())
    previous = state.buffer(state.next_index())

    births = mx.sum(((current == 1) & (previous == 0)).astype(mx.uint32))
    deaths = mx.sum(((current == 0) & (previous == 1)).astype(mx.uint32))

    return {"births": int(births.item()), "deaths": int(deaths.item())}


def bounding_box(state: GridState) -> Optional[tuple[int, int, int, int]]:
    """
    Smallest (x_min, x_max, y_min, y_max) box containing every live cell.

    Returns:
        Inclusive bounds, or None for an empty grid
    """
    cells = state.read_current()
    xs, ys = np.nonzero(cells)
    if len(xs) == 0:
        return None
    return int(xs.min()), int(xs.max()), int(ys.min()), int(ys.max())


def compute_all_metrics(state: GridState) -> dict:
    """
    Compute all available metrics.

    Args:
        state: Grid state

    Returns:
        Comprehensive dictionary of all metrics
    """
    return {
        "tick": state.tick,
        "grid_size": state.size,
        "population": {
            "live": population(state),
            "density": density(state),
            "bounding_box": bounding_box(state),
        },
        "transitions": transitions(state),
    }


def print_metrics_summary(metrics: dict) -> None:
    """
    Print formatted metrics summary.

    Args:
        metrics: Output from compute_all_metrics
    """
    print("\n=== Life Game Metrics Summary ===\n")

    print(f"Tick: {metrics['tick']}")
    print(f"Grid: {metrics['grid_size']}x{metrics['grid_size']}")

    print("\nPopulation:")
    pop = metrics['population']
    print(f"  Live cells: {pop['live']}")
    print(f"  Density: {pop['density']:.4f}")
    if pop['bounding_box'] is not None:
        x_min, x_max, y_min, y_max = pop['bounding_box']
        print(f"  Bounding box: x={x_min}..{x_max}, y={y_min}..{y_max}")

    print("\nLast step:")
    if metrics['transitions'] is None:
        print("  Previous tick unavailable")
    else:
        print(f"  Births: {metrics['transitions']['births']}")
        print(f"  Deaths: {metrics['transitions']['deaths']}")

    print()
