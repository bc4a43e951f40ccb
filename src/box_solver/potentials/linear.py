"""
Linear potential inside the box.

V(x) = b x on [0, L], the potential of a particle in a uniform field.
"""

import math

import numpy as np
from numpy.typing import NDArray
from typing import Union

from box_solver.core.box_model import check_real


class LinearPotential:
    """
    Linear potential V(x) = b x.

    Matrix elements in the box basis φ_n(x) = sqrt(2/L) sin(nπx/L) are known
    in closed form:

        V_nn = b L / 2
        V_nm = (b L / π²) (cos(dπ) - 1) (1/d² - 1/(n+m)²),   d = n - m

    Since cos(dπ) = (-1)^d, states are coupled only when n - m is odd.

    Attributes:
        b: Slope of the potential.
    """

    def __init__(self, b: float = 0.0):
        """
        Initialize the linear potential.

        Args:
            b: Slope. Must be finite.
        """
        check_real("b", b)
        self.b = float(b)

    def __call__(
        self,
        x: Union[float, NDArray[np.floating]]
    ) -> Union[float, NDArray[np.floating]]:
        """
        Evaluate the potential at position(s) x.

        Args:
            x: Position(s) inside the box.

        Returns:
            Potential value(s).
        """
        return self.b * x

    def matrix_element(self, n: int, m: int, L: float) -> float:
        """
        Closed-form ⟨φ_n|V|φ_m⟩ for quantum numbers n, m >= 1.

        Args:
            n: Row quantum number.
            m: Column quantum number.
            L: Box length.

        Returns:
            The matrix element. Exactly zero when n - m is even and n != m.
        """
        if n == m:
            return 0.5 * self.b * L
        d = n - m
        # (-1)^d - 1 is cos(dπ) - 1 without rounding: 0 for even d, -2 for odd d
        parity_factor = -2.0 if d % 2 else 0.0
        if parity_factor == 0.0:
            return 0.0
        s = n + m
        return (self.b * L / math.pi**2) * parity_factor * (1.0 / d**2 - 1.0 / s**2)

    def matrix(self, N: int, L: float) -> NDArray[np.floating]:
        """
        Build the full N×N matrix of V in the box basis.

        Same closed form as matrix_element, evaluated for all index pairs
        at once. The result is exactly symmetric: every off-diagonal entry
        depends on d only through d² and on n + m.

        Args:
            N: Basis size.
            L: Box length.

        Returns:
            Array of shape (N, N).
        """
        n = np.arange(1, N + 1)
        d = n[:, np.newaxis] - n[np.newaxis, :]
        s = n[:, np.newaxis] + n[np.newaxis, :]
        odd = (d % 2) != 0

        V = np.zeros((N, N), dtype=float)
        prefactor = self.b * L / math.pi**2
        d_odd = d[odd].astype(float)
        s_odd = s[odd].astype(float)
        V[odd] = prefactor * -2.0 * (1.0 / d_odd**2 - 1.0 / s_odd**2)
        np.fill_diagonal(V, 0.5 * self.b * L)
        return V

    def __repr__(self) -> str:
        return f"LinearPotential(b={self.b:g})"
