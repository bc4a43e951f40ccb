"""
Exception hierarchy for the box solver.

Each failure mode of a calculation maps to its own exception class so callers
can tell a bad parameter from a shape error or a failed diagonalization.
"""

from typing import Optional

import numpy as np


class BoxSolverError(Exception):
    """Base class for all box solver errors."""


class InvalidParameterError(BoxSolverError, ValueError):
    """Raised when N < 1, L <= 0, mass <= 0 or the slope is not finite."""


class DimensionMismatchError(BoxSolverError, ValueError):
    """Raised when matrices of incompatible shape are combined or solved."""


class DiagonalizationFailedError(BoxSolverError, np.linalg.LinAlgError):
    """
    Raised when the dense symmetric eigensolver does not succeed.
    
    Attributes:
        code: LAPACK ``info`` value. Negative means an illegal argument,
              positive means the algorithm failed to converge. None when
              the input was rejected before LAPACK was called.
    """
    
    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.code = code
    
    def __str__(self) -> str:
        base = super().__str__()
        if self.code is None:
            return base
        return f"{base} (info={self.code})"
