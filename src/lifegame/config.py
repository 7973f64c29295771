"""
Configuration dataclass for life-game simulation parameters.

Grid size and tick period are pure configuration: the update rule behaves
identically for every value they take.
"""

from dataclasses import dataclass, asdict
from typing import Any

from .errors import ConfigurationError


@dataclass
class Config:
    """
    Complete configuration for a life-game simulation.

    Attributes:
        grid_size: Width and height of the (square) grid
        seed_probability: Probability that a seeded cell starts alive

        # Scheduling
        tick_period_ms: Delay between ticks when running in real time
        tile_size: Side of the square tiles a step is split into

        # Rendering
        alive_color: RGB color of live cells, components in [0, 1]
        dead_color: RGB color of dead cells (background)
    """

    # Grid
    grid_size: int = 128
    seed_probability: float = 0.5

    # Scheduling
    tick_period_ms: float = 10.0
    tile_size: int = 16

    # Rendering
    alive_color: tuple[float, float, float] = (0.36, 0.68, 0.22)
    dead_color: tuple[float, float, float] = (0.2, 0.2, 0.2)

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        """Check that all parameters are in valid ranges."""
        if isinstance(self.grid_size, bool) or not isinstance(self.grid_size, int):
            raise ConfigurationError(f"grid_size must be an integer, got {self.grid_size!r}")

        if self.grid_size <= 0:
            raise ConfigurationError(f"grid_size must be > 0, got {self.grid_size}")

        if not 0.0 <= self.seed_probability <= 1.0:
            raise ConfigurationError(
                f"seed_probability must be in [0, 1], got {self.seed_probability}"
            )

        if self.tick_period_ms < 0:
            raise ConfigurationError(f"tick_period_ms must be >= 0, got {self.tick_period_ms}")

        if self.tile_size <= 0:
            raise ConfigurationError(f"tile_size must be > 0, got {self.tile_size}")

        for name in ("alive_color", "dead_color"):
            color = getattr(self, name)
            if len(color) != 3 or not all(0.0 <= c <= 1.0 for c in color):
                raise ConfigurationError(f"{name} must be an RGB triple in [0, 1], got {color}")

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        d = dict(d)
        # JSON round-trips tuples as lists
        for name in ("alive_color", "dead_color"):
            if name in d and isinstance(d[name], list):
                d[name] = tuple(d[name])
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "Config":
        """Create config from argparse namespace."""
        # Extract only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)

    @property
    def tick_period_s(self) -> float:
        """Tick period in seconds."""
        return self.tick_period_ms / 1000.0
