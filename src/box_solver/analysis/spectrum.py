"""
Analysis helpers for variational box spectra.

Provides the exact free-box reference spectrum, real-space wavefunctions
rebuilt from expansion coefficients, position expectation values and a
scan of the ground-state energy over the potential slope.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Iterable, Union

from box_solver.core.parameters import BoxParameters
from box_solver.basis.box_basis import BoxBasis, build_kinetic_matrix, build_potential_matrix
from box_solver.core.variational import VariationalBoxSolver
from box_solver.eigensolver.symmetric import Spectrum


def exact_box_energies(N: int, L: float, mass: float) -> NDArray[np.floating]:
    """
    Exact spectrum of the free particle in a box.

    E_n = (π² / (2 m L²)) n²,   n = 1..N
    """
    return np.diag(build_kinetic_matrix(N, L, mass)).copy()


def wavefunction(
    spectrum: Spectrum,
    k: int,
    x: Union[float, NDArray[np.floating]],
    L: float
) -> NDArray[np.floating]:
    """
    Real-space wavefunction of state k.

    ψ_k(x) = Σ_n c_{nk} φ_n(x)

    Args:
        spectrum: Spectrum from the eigensolver.
        k: State index (0 = ground state).
        x: Position(s) at which to evaluate.
        L: Box length used to build the spectrum.

    Returns:
        Array of ψ_k values, one per position.
    """
    basis = BoxBasis(spectrum.n_states, L)
    return basis.evaluate(x) @ spectrum.eigenvectors[:, k]


def position_expectation(spectrum: Spectrum, L: float) -> NDArray[np.floating]:
    """
    ⟨x⟩ for every state in the spectrum.

    Uses the matrix of x itself, i.e. the potential matrix with b = 1:
    ⟨x⟩_k = c_kᵀ X c_k.
    """
    X = build_potential_matrix(spectrum.n_states, L, 1.0)
    C = spectrum.eigenvectors
    return np.einsum('nk,nm,mk->k', C, X, C)


def scan_slope(
    params: BoxParameters,
    slopes: Iterable[float],
    driver: str = "evd"
) -> NDArray[np.floating]:
    """
    Ground-state energy as a function of the potential slope.

    Args:
        params: Base parameters; b is replaced by each slope in turn.
        slopes: Values of b to scan.
        driver: LAPACK driver for the eigensolver.

    Returns:
        Array of ground-state energies, one per slope.
    """
    energies = []
    for b in slopes:
        solver = VariationalBoxSolver(params.replace(b=float(b)), driver=driver)
        energies.append(solver.solve().ground_state_energy)
    return np.array(energies)
