"""
Tests for the linear potential and its closed-form matrix elements.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.integrate import quad

from box_solver.potentials.linear import LinearPotential
from box_solver.core.exceptions import InvalidParameterError


def _box_function(n, L):
    return lambda x: math.sqrt(2.0 / L) * math.sin(n * math.pi * x / L)


class TestLinearPotential:
    """Test evaluation of V(x) = b x."""

    def test_evaluation(self):
        pot = LinearPotential(b=2.5)
        x = np.linspace(0, 1, 11)
        assert_allclose(pot(x), 2.5 * x)

    def test_non_finite_slope_raises(self):
        with pytest.raises(InvalidParameterError):
            LinearPotential(b=float('inf'))

    def test_non_numeric_slope_raises(self):
        with pytest.raises(InvalidParameterError):
            LinearPotential(b="1.0")


class TestMatrixElements:
    """Test closed-form matrix elements against direct integration."""

    @pytest.mark.parametrize("n,m", [(1, 1), (1, 2), (2, 1), (1, 4), (2, 5), (3, 3), (1, 3)])
    def test_matches_quadrature(self, n, m):
        L, b = 1.7, 2.3
        pot = LinearPotential(b)
        phi_n = _box_function(n, L)
        phi_m = _box_function(m, L)
        expected, _ = quad(lambda x: phi_n(x) * b * x * phi_m(x), 0, L,
                           limit=200, epsabs=1e-13)
        assert_allclose(pot.matrix_element(n, m, L), expected, atol=1e-10)

    def test_diagonal_is_midpoint(self):
        pot = LinearPotential(b=4.0)
        for n in range(1, 8):
            assert pot.matrix_element(n, n, 3.0) == 6.0

    def test_even_difference_exactly_zero(self):
        pot = LinearPotential(b=1.0)
        assert pot.matrix_element(1, 3, 1.0) == 0.0
        assert pot.matrix_element(6, 2, 1.0) == 0.0

    def test_n1_n2_value(self):
        """⟨1|x|2⟩ = -16 L / (9 π²)."""
        pot = LinearPotential(b=1.0)
        assert_allclose(pot.matrix_element(1, 2, 1.0), -16.0 / (9.0 * math.pi**2))

    def test_full_matrix_agrees_with_elements(self):
        pot = LinearPotential(b=-1.3)
        N, L = 7, 2.2
        V = pot.matrix(N, L)
        for i in range(N):
            for j in range(N):
                assert_allclose(V[i, j], pot.matrix_element(i + 1, j + 1, L),
                                rtol=1e-14, atol=1e-15)
