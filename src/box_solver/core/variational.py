"""
Variational solver for a particle in a box with a linear potential.

Runs the full pipeline:
    1. Kinetic matrix T (diagonal in the box basis)
    2. Potential matrix V (closed-form matrix elements of b x)
    3. Hamiltonian H = T + V
    4. Dense symmetric diagonalization of H
"""

import time
from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np
from numpy.typing import NDArray

from box_solver.core.parameters import BoxParameters
from box_solver.basis.box_basis import BasisMatrixBuilder
from box_solver.eigensolver.hamiltonian import assemble_hamiltonian
from box_solver.eigensolver.symmetric import SymmetricEigensolver, Spectrum


@dataclass
class VariationalResult:
    """
    Result of one variational calculation.

    Holds every intermediate matrix so the caller can report them.
    """
    params: BoxParameters
    kinetic: NDArray[np.floating]
    potential: NDArray[np.floating]
    hamiltonian: NDArray[np.floating]
    spectrum: Spectrum

    # Wall-clock seconds per stage
    timings: Dict[str, float] = field(default_factory=dict)

    @property
    def ground_state_energy(self) -> float:
        return self.spectrum.ground_state_energy

    @property
    def total_time(self) -> float:
        return sum(self.timings.values())


class VariationalBoxSolver:
    """
    Particle in a box of length L under V(x) = b x, solved in the basis
    of the first N box eigenfunctions.

    Usage:
        solver = VariationalBoxSolver(BoxParameters(N=20, L=1.0, mass=1.0, b=5.0))
        result = solver.solve()
        print(f"Ground state: {result.ground_state_energy}")
    """

    def __init__(
        self,
        params: Optional[BoxParameters] = None,
        driver: str = "evd",
        verbose: bool = False
    ):
        """
        Initialize the solver.

        Args:
            params: Calculation parameters. If None, uses defaults.json.
            driver: LAPACK driver for the eigensolver ("evd" or "ev").
            verbose: Print progress for each stage.
        """
        self.params = params if params is not None else BoxParameters()
        self.verbose = verbose
        self.builder = BasisMatrixBuilder(self.params)
        self.eigensolver = SymmetricEigensolver(driver=driver, verbose=verbose)

    def solve(self) -> VariationalResult:
        """
        Build and diagonalize the Hamiltonian.

        Returns:
            VariationalResult with T, V, H, the spectrum and stage timings.

        Raises:
            DiagonalizationFailedError: If LAPACK reports a failure.
        """
        if self.verbose:
            print(f"Variational box calculation: {self.params!r}")

        timings = {}

        start = time.perf_counter()
        T = self.builder.kinetic()
        timings['kinetic'] = time.perf_counter() - start

        start = time.perf_counter()
        V = self.builder.potential()
        timings['potential'] = time.perf_counter() - start

        start = time.perf_counter()
        H = assemble_hamiltonian(T, V)
        timings['hamiltonian'] = time.perf_counter() - start

        start = time.perf_counter()
        spectrum = self.eigensolver.solve(H)
        timings['diagonalize'] = time.perf_counter() - start

        if self.verbose:
            print(f"  Done in {sum(timings.values()):.4f} s")

        return VariationalResult(
            params=self.params,
            kinetic=T,
            potential=V,
            hamiltonian=H,
            spectrum=spectrum,
            timings=timings,
        )


def solve_box(
    N: int,
    L: float = 1.0,
    mass: float = 1.0,
    b: float = 0.0,
    driver: str = "evd"
) -> VariationalResult:
    """Convenience wrapper: build parameters and solve."""
    params = BoxParameters(N=N, L=L, mass=mass, b=b)
    return VariationalBoxSolver(params, driver=driver).solve()
