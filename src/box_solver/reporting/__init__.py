"""
Reporting module for Box Solver.
"""

from box_solver.reporting.results_reporter import ResultReporter

__all__ = ["ResultReporter"]
