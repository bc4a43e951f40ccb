"""
Eigensolver module for Box Solver.

- assemble_hamiltonian: H = T + V with shape checks
- diagonalize / SymmetricEigensolver: dense LAPACK ?syevd / ?syev
- Spectrum: ordered eigenvalues with column-aligned eigenvectors
"""

from box_solver.eigensolver.hamiltonian import assemble_hamiltonian
from box_solver.eigensolver.symmetric import (
    diagonalize,
    Spectrum,
    SymmetricEigensolver,
)

__all__ = [
    "assemble_hamiltonian",
    "diagonalize",
    "Spectrum",
    "SymmetricEigensolver",
]
