"""
Seed sources for grid initialization.

A seed source is a zero-argument callable returning 0 or 1. Injecting it
keeps initialization reproducible in tests.
"""

from typing import Optional

import numpy as np

from .errors import ConfigurationError
from .grid import SeedSource


def random_seed_source(probability: float = 0.5, seed: Optional[int] = None) -> SeedSource:
    """
    Bernoulli seed source.

    Args:
        probability: Chance that a sampled cell is alive
        seed: Random seed for reproducibility (None = fresh entropy)

    Returns:
        Callable yielding independent 0/1 samples
    """
    if not 0.0 <= probability <= 1.0:
        raise ConfigurationError(f"probability must be in [0, 1], got {probability}")

    rng = np.random.default_rng(seed)

    def sample() -> int:
        return 1 if rng.random() < probability else 0

    return sample


def constant_seed_source(value: int) -> SeedSource:
    """Seed source that always yields ``value`` (all-dead or all-alive grids)."""
    if value not in (0, 1):
        raise ConfigurationError(f"value must be 0 or 1, got {value}")
    return lambda: value
