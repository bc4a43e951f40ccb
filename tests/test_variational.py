"""
Tests for the full variational pipeline.

Checks the free-box limit, the two-state problem against its closed-form
eigenvalues, and general properties of tilted-box spectra.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from box_solver.core.parameters import BoxParameters
from box_solver.core.variational import VariationalBoxSolver, VariationalResult, solve_box
from box_solver.analysis.spectrum import exact_box_energies


class TestFreeBoxLimit:
    """b = 0 reproduces the exact particle-in-a-box spectrum."""

    def test_ground_state_unit_box(self, unit_box):
        result = VariationalBoxSolver(unit_box).solve()
        assert_allclose(result.ground_state_energy, math.pi**2 / 2, rtol=1e-12)
        assert_allclose(result.ground_state_energy, 4.9348, atol=1e-4)

    def test_ground_state_vector_is_first_basis_function(self, unit_box):
        result = VariationalBoxSolver(unit_box).solve()
        expected = np.zeros(5)
        expected[0] = 1.0
        assert_allclose(np.abs(result.spectrum.ground_state_vector), expected, atol=1e-12)

    @pytest.mark.parametrize("N,L,mass", [(1, 1.0, 1.0), (8, 2.0, 0.5), (30, 0.1, 3.0)])
    def test_full_spectrum(self, N, L, mass):
        result = solve_box(N, L, mass, b=0.0)
        assert_allclose(result.spectrum.eigenvalues, exact_box_energies(N, L, mass),
                        rtol=1e-12)

    def test_eigenvectors_are_identity(self):
        result = solve_box(6, b=0.0)
        assert_allclose(np.abs(result.spectrum.eigenvectors), np.eye(6), atol=1e-12)


class TestTwoStateProblem:
    """N=2, L=1, mass=1, b=1 against the closed-form 2×2 solution."""

    @pytest.fixture
    def result(self):
        return VariationalBoxSolver(BoxParameters(N=2, L=1.0, mass=1.0, b=1.0)).solve()

    def test_matrices(self, result):
        assert_allclose(np.diag(result.kinetic), [math.pi**2 / 2, 2 * math.pi**2])
        assert_allclose(np.diag(result.potential), [0.5, 0.5])
        V12 = (1.0 / math.pi**2) * -2.0 * (1.0 - 1.0 / 9.0)
        assert_allclose(result.potential[0, 1], V12, rtol=1e-14)
        assert result.potential[0, 1] == result.potential[1, 0]
        assert np.array_equal(result.hamiltonian, result.hamiltonian.T)

    def test_eigenvalues_closed_form(self, result):
        H = result.hamiltonian
        mean = 0.5 * (H[0, 0] + H[1, 1])
        half_gap = math.sqrt((0.5 * (H[0, 0] - H[1, 1]))**2 + H[0, 1]**2)
        assert_allclose(result.spectrum.eigenvalues, [mean - half_gap, mean + half_gap],
                        rtol=1e-12)

    def test_eigenvectors_closed_form(self, result):
        H = result.hamiltonian
        for k in range(2):
            E, v = result.spectrum.state(k)
            # (H11 - E) v1 + H12 v2 = 0  =>  v ∝ (H12, E - H11)
            expected = np.array([H[0, 1], E - H[0, 0]])
            expected /= np.linalg.norm(expected)
            assert_allclose(abs(np.dot(v, expected)), 1.0, rtol=1e-12)
        assert result.spectrum.orthonormality_error() < 1e-12

    def test_shifted_from_free_box(self, result):
        free = exact_box_energies(2, 1.0, 1.0)
        E = result.spectrum.eigenvalues
        assert E[0] > free[0]
        assert not np.allclose(E, free)
        # Level repulsion: the pair spreads wider than the diagonal of H
        assert E[0] < result.hamiltonian[0, 0]
        assert E[1] > result.hamiltonian[1, 1]


class TestTiltedBox:
    """General properties for b != 0."""

    def test_eigen_equation(self, tilted_box):
        result = VariationalBoxSolver(tilted_box).solve()
        assert np.max(result.spectrum.residuals(result.hamiltonian)) < 1e-8

    def test_ordering_and_orthonormality(self, tilted_box):
        spectrum = VariationalBoxSolver(tilted_box).solve().spectrum
        assert np.all(np.diff(spectrum.eigenvalues) >= 0)
        assert spectrum.orthonormality_error() < 1e-8

    def test_variational_upper_bound_decreases_with_basis(self):
        """Enlarging the basis can only lower the ground-state energy."""
        energies = [solve_box(N, b=40.0).ground_state_energy for N in (2, 4, 8, 16, 32)]
        assert np.all(np.diff(energies) <= 1e-12)

    def test_slope_sign_symmetry(self):
        """x -> L - x maps b to -b and shifts energies by b L."""
        L, b = 1.5, 12.0
        E_pos = solve_box(20, L, 1.0, b).spectrum.eigenvalues
        E_neg = solve_box(20, L, 1.0, -b).spectrum.eigenvalues
        assert_allclose(E_pos, E_neg + b * L, rtol=1e-10)

    def test_hellmann_feynman_weak_field(self):
        """To first order E_n shifts by b L / 2."""
        b = 1e-4
        result = solve_box(10, 1.0, 1.0, b)
        free = exact_box_energies(10, 1.0, 1.0)
        assert_allclose(result.spectrum.eigenvalues - free, 0.5 * b, rtol=1e-3)


class TestVariationalResult:
    """Test the result container and the solver wrapper."""

    def test_timings_recorded(self, unit_box):
        result = VariationalBoxSolver(unit_box).solve()
        assert isinstance(result, VariationalResult)
        assert set(result.timings) == {'kinetic', 'potential', 'hamiltonian', 'diagonalize'}
        assert all(t >= 0 for t in result.timings.values())
        assert result.total_time == pytest.approx(sum(result.timings.values()))

    def test_default_parameters(self):
        solver = VariationalBoxSolver()
        assert solver.params == BoxParameters()

    def test_ev_driver(self, tilted_box):
        E_evd = VariationalBoxSolver(tilted_box, driver="evd").solve().spectrum.eigenvalues
        E_ev = VariationalBoxSolver(tilted_box, driver="ev").solve().spectrum.eigenvalues
        assert_allclose(E_ev, E_evd, rtol=1e-10)

    def test_verbose_output(self, unit_box, capsys):
        VariationalBoxSolver(unit_box, verbose=True).solve()
        out = capsys.readouterr().out
        assert "Variational box calculation" in out
        assert "Done in" in out
