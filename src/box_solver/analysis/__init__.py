"""
Analysis module for Box Solver.
"""

from box_solver.analysis.spectrum import (
    exact_box_energies,
    wavefunction,
    position_expectation,
    scan_slope,
)

__all__ = [
    "exact_box_energies",
    "wavefunction",
    "position_expectation",
    "scan_slope",
]
