"""
Pytest configuration and fixtures for life-game tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from lifegame.config import Config
from lifegame.grid import GridState, initialize
from lifegame.patterns import place_pattern
from lifegame.seeding import random_seed_source


@pytest.fixture
def default_config() -> Config:
    """Default configuration for tests."""
    return Config(grid_size=32)


@pytest.fixture
def small_config() -> Config:
    """Small grid for fast tests."""
    return Config(grid_size=8, tile_size=4)


@pytest.fixture
def random_state(default_config: Config) -> GridState:
    """Reproducible random initial state."""
    return initialize(default_config.grid_size, random_seed_source(0.5, seed=42))


@pytest.fixture
def blinker_state() -> GridState:
    """Horizontal blinker at (2,1),(2,2),(2,3) on a 6x6 grid."""
    return place_pattern(6, "blinker", origin=(2, 1))


@pytest.fixture
def empty_state() -> GridState:
    """All-dead 10x10 grid."""
    return GridState.from_cells([[0] * 10 for _ in range(10)])
