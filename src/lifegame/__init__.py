"""
Life Game - double-buffered B3/S23 cellular automaton.

A fixed-size grid of dead/alive cells advanced one synchronous tick at a
time, with reads from a frozen buffer and writes to its ping-pong partner.
"""

__version__ = "0.1.0"

from .config import Config
from .errors import (
    CellIndexError,
    ConfigurationError,
    LifeGameError,
    PreconditionViolation,
    StepFault,
)
from .grid import GridState, initialize, read_current
from .neighbors import count_neighbors
from .rules import next_value
from .scheduler import StepScheduler, step

__all__ = [
    "Config",
    "GridState",
    "StepScheduler",
    "initialize",
    "step",
    "read_current",
    "count_neighbors",
    "next_value",
    "LifeGameError",
    "ConfigurationError",
    "PreconditionViolation",
    "CellIndexError",
    "StepFault",
    "__version__",
]
