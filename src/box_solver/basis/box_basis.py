"""
Particle-in-a-box basis and its analytic matrix representations.

The basis functions are the exact eigenfunctions of a free particle in a
box of length L:

    φ_n(x) = sqrt(2/L) sin(nπx/L),   n = 1, 2, ..., N

Kinetic energy is diagonal in this basis. The linear potential V(x) = b x
has closed-form matrix elements (see LinearPotential).

Matrix row/column index k corresponds to quantum number n = k + 1.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Union

from box_solver.core.parameters import BoxParameters
from box_solver.core.box_model import validate_box_inputs, box_energy_scale
from box_solver.potentials.linear import LinearPotential


def build_kinetic_matrix(N: int, L: float, mass: float) -> NDArray[np.floating]:
    """
    Kinetic energy matrix in the box basis.

    T_nn = (π² / (2 m L²)) n²; all off-diagonal elements are zero.

    Args:
        N: Basis size (>= 1).
        L: Box length (> 0).
        mass: Particle mass (> 0).

    Returns:
        Diagonal array of shape (N, N).

    Raises:
        InvalidParameterError: If any argument is out of range.
    """
    validate_box_inputs(N, L, mass)
    n = np.arange(1, N + 1, dtype=float)
    return np.diag(box_energy_scale(L, mass) * n**2)


def build_potential_matrix(N: int, L: float, b: float) -> NDArray[np.floating]:
    """
    Matrix of the linear potential V(x) = b x in the box basis.

    Diagonal entries are b L / 2. Off-diagonal entries vanish exactly
    when n - m is even.

    Args:
        N: Basis size (>= 1).
        L: Box length (> 0).
        b: Potential slope.

    Returns:
        Symmetric array of shape (N, N).

    Raises:
        InvalidParameterError: If any argument is out of range.
    """
    validate_box_inputs(N, L, b=b)
    return LinearPotential(b).matrix(N, L)


class BoxBasis:
    """
    Truncated basis of particle-in-a-box eigenfunctions.

    Attributes:
        N: Number of basis functions.
        L: Box length.
    """

    def __init__(self, N: int, L: float):
        validate_box_inputs(N, L)
        self.N = N
        self.L = L

    @property
    def quantum_numbers(self) -> NDArray[np.integer]:
        """Quantum numbers 1..N."""
        return np.arange(1, self.N + 1)

    def evaluate(
        self,
        x: Union[float, NDArray[np.floating]]
    ) -> NDArray[np.floating]:
        """
        Evaluate every basis function at position(s) x.

        Points outside [0, L] evaluate to zero (the wavefunction vanishes
        outside the box).

        Args:
            x: Position or array of positions.

        Returns:
            Array of shape (len(x), N); column k holds φ_{k+1}(x).
        """
        x = np.atleast_1d(np.asarray(x, dtype=float))
        n = self.quantum_numbers
        phi = np.sqrt(2.0 / self.L) * np.sin(np.pi * np.outer(x, n) / self.L)
        outside = (x < 0) | (x > self.L)
        phi[outside, :] = 0.0
        return phi

    def kinetic_matrix(self, mass: float) -> NDArray[np.floating]:
        return build_kinetic_matrix(self.N, self.L, mass)

    def potential_matrix(self, potential: LinearPotential) -> NDArray[np.floating]:
        """Matrix of the given linear potential in this basis."""
        return build_potential_matrix(self.N, self.L, potential.b)

    def __repr__(self) -> str:
        return f"BoxBasis(N={self.N}, L={self.L:g})"


class BasisMatrixBuilder:
    """
    Builds the kinetic and potential matrices for one set of parameters.

    Usage:
        builder = BasisMatrixBuilder(BoxParameters(N=5, L=1.0, mass=1.0, b=1.0))
        T = builder.kinetic()
        V = builder.potential()
    """

    def __init__(self, params: BoxParameters):
        self.params = params
        self.basis = BoxBasis(params.N, params.L)
        self.potential_function = LinearPotential(params.b)

    def kinetic(self) -> NDArray[np.floating]:
        """Kinetic energy matrix T."""
        return self.basis.kinetic_matrix(self.params.mass)

    def potential(self) -> NDArray[np.floating]:
        """Potential energy matrix V."""
        return self.basis.potential_matrix(self.potential_function)
