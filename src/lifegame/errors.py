"""
Exception hierarchy for the life-game simulation core.
"""


class LifeGameError(Exception):
    """Base class for all simulation errors."""


class ConfigurationError(LifeGameError, ValueError):
    """Invalid grid size, seed value or configuration parameter."""


class PreconditionViolation(LifeGameError):
    """A caller broke the contract of a GridState operation."""


class CellIndexError(PreconditionViolation, IndexError):
    """Cell or buffer access outside the grid."""


class StepFault(LifeGameError, RuntimeError):
    """A step failed mid-computation; no swap was committed."""
