"""
Assembly of the Hamiltonian matrix H = T + V.
"""

import numpy as np
from numpy.typing import NDArray

from box_solver.core.exceptions import DimensionMismatchError


def check_square(M: NDArray, name: str = "matrix") -> None:
    """Raise DimensionMismatchError unless M is a 2-D square array."""
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise DimensionMismatchError(
            f"{name} must be a square 2-D array, got shape {M.shape}"
        )


def assemble_hamiltonian(
    T: NDArray[np.floating],
    V: NDArray[np.floating]
) -> NDArray[np.floating]:
    """
    Elementwise sum of the kinetic and potential matrices.

    Args:
        T: Kinetic energy matrix, shape (N, N).
        V: Potential energy matrix, shape (N, N).

    Returns:
        New array H = T + V. Inputs are not modified.

    Raises:
        DimensionMismatchError: If T and V are not square or differ in shape.
    """
    T = np.asarray(T, dtype=float)
    V = np.asarray(V, dtype=float)
    check_square(T, "T")
    check_square(V, "V")
    if T.shape != V.shape:
        raise DimensionMismatchError(
            f"T and V must have the same shape, got {T.shape} and {V.shape}"
        )
    return T + V
