"""
Input checks and free-box quantities shared across the package.

Kept free of other box_solver imports (apart from the exceptions) so that
the defaults loader, the parameters dataclass and the matrix builders can
all use it.
"""

import math
import numbers

from box_solver.core.exceptions import InvalidParameterError


def check_basis_size(N) -> None:
    """N must be an integer >= 1 (bool is rejected)."""
    if isinstance(N, bool) or not isinstance(N, numbers.Integral):
        raise InvalidParameterError(f"N must be an integer, got {N!r}")
    if N < 1:
        raise InvalidParameterError(f"N must be >= 1, got {N}")


def check_real(name: str, value, positive: bool = False) -> None:
    """
    value must be a finite real number, and > 0 if positive is set.

    Raises:
        InvalidParameterError: Otherwise, including for non-numeric values.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}")
    if positive and not value > 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")


def validate_box_inputs(N, L: float, mass: float = 1.0, b: float = 0.0) -> None:
    """
    Check the inputs of a matrix construction.

    Raises:
        InvalidParameterError: If N is not an integer >= 1, L or mass is
            not a positive finite number, or b is not a finite number.
    """
    check_basis_size(N)
    check_real("L", L, positive=True)
    check_real("mass", mass, positive=True)
    check_real("b", b)


def box_energy_scale(L: float, mass: float) -> float:
    """
    Ground-state energy of the free box, E_1 = π² / (2 m L²).

    E_n = E_1 n² for every level.
    """
    return math.pi**2 / (2.0 * mass * L**2)
