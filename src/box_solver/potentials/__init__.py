"""
Potentials module for Box Solver.

Contains the linear potential V(x) = b x and its closed-form matrix
elements in the particle-in-a-box basis.
"""

from box_solver.potentials.linear import LinearPotential

__all__ = [
    "LinearPotential",
]
