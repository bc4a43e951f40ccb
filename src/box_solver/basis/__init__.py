"""
Basis module for Box Solver.

Particle-in-a-box eigenfunctions and the kinetic/potential matrices
built from them.
"""

from box_solver.basis.box_basis import (
    BoxBasis,
    BasisMatrixBuilder,
    build_kinetic_matrix,
    build_potential_matrix,
)

__all__ = [
    "BoxBasis",
    "BasisMatrixBuilder",
    "build_kinetic_matrix",
    "build_potential_matrix",
]
