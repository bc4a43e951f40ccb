"""
Core module for Box Solver.

Contains the error taxonomy, default parameters and the BoxParameters
dataclass. The variational driver lives in box_solver.core.variational.
"""

from box_solver.core.exceptions import (
    BoxSolverError,
    InvalidParameterError,
    DimensionMismatchError,
    DiagonalizationFailedError,
)
from box_solver.core.config import (
    DEFAULT_N,
    DEFAULT_L,
    DEFAULT_MASS,
    DEFAULT_B,
)
from box_solver.core.parameters import BoxParameters

__all__ = [
    "BoxSolverError",
    "InvalidParameterError",
    "DimensionMismatchError",
    "DiagonalizationFailedError",
    "DEFAULT_N",
    "DEFAULT_L",
    "DEFAULT_MASS",
    "DEFAULT_B",
    "BoxParameters",
]
