"""
Box Solver - Variational Particle-in-a-Box Solver

Computes energy eigenvalues and eigenvectors of a particle confined to a
one-dimensional box of length L with an added linear potential V(x) = b x,
by diagonalizing the Hamiltonian in a basis of exact box eigenfunctions.

Main Interface:
    from box_solver import BoxParameters, VariationalBoxSolver

    solver = VariationalBoxSolver(BoxParameters(N=20, L=1.0, mass=1.0, b=5.0))
    result = solver.solve()
    print(f"Ground state energy: {result.ground_state_energy}")

Components:
- build_kinetic_matrix / build_potential_matrix: analytic matrices
- assemble_hamiltonian: H = T + V
- diagonalize / SymmetricEigensolver: dense LAPACK eigensolver
- ResultReporter: tabulated output
"""

from box_solver.core import (
    BoxParameters,
    BoxSolverError,
    InvalidParameterError,
    DimensionMismatchError,
    DiagonalizationFailedError,
)
from box_solver.potentials import LinearPotential
from box_solver.basis import (
    BoxBasis,
    BasisMatrixBuilder,
    build_kinetic_matrix,
    build_potential_matrix,
)
from box_solver.eigensolver import (
    assemble_hamiltonian,
    diagonalize,
    Spectrum,
    SymmetricEigensolver,
)
from box_solver.core.variational import (
    VariationalBoxSolver,
    VariationalResult,
    solve_box,
)

__version__ = "0.1.0"

__all__ = [
    # Parameters and errors
    "BoxParameters",
    "BoxSolverError",
    "InvalidParameterError",
    "DimensionMismatchError",
    "DiagonalizationFailedError",
    # Basis and matrices
    "LinearPotential",
    "BoxBasis",
    "BasisMatrixBuilder",
    "build_kinetic_matrix",
    "build_potential_matrix",
    # Eigensolver
    "assemble_hamiltonian",
    "diagonalize",
    "Spectrum",
    "SymmetricEigensolver",
    # Main interface
    "VariationalBoxSolver",
    "VariationalResult",
    "solve_box",
]
