"""
Slope Scan for the Variational Box Solver.

Tracks the lowest energy levels and the ground-state position as the
slope b of the linear potential grows, and compares them with the free
box spectrum.
"""

import numpy as np
import time
from tabulate import tabulate

from box_solver.core.parameters import BoxParameters
from box_solver.core.variational import VariationalBoxSolver
from box_solver.analysis.spectrum import exact_box_energies, position_expectation


def run_scan(params, slopes, n_levels=3):
    """Solve for each slope and collect one table row per slope."""
    free = exact_box_energies(params.N, params.L, params.mass)
    table_data = []
    for b in slopes:
        start_time = time.time()
        result = VariationalBoxSolver(params.replace(b=float(b))).solve()
        elapsed_time = time.time() - start_time

        E = result.spectrum.eigenvalues[:n_levels]
        x_mean = position_expectation(result.spectrum, params.L)[0]
        table_data.append(
            [f"{b:.2f}"]
            + [f"{e:.6f}" for e in E]
            + [f"{E[0] - free[0]:+.6f}", f"{x_mean / params.L:.4f}", f"{elapsed_time:.4f}"]
        )
    return table_data


def main():
    print("=" * 80)
    print("PARTICLE IN A BOX: SLOPE SCAN")
    print("=" * 80)

    params = BoxParameters(N=40, L=1.0, mass=1.0, b=0.0)
    slopes = np.linspace(0.0, 200.0, 11)
    print(f"Parameters: {params!r}\n")

    table_data = run_scan(params, slopes)
    headers = ['b', 'E_0', 'E_1', 'E_2', 'E_0 shift', '<x>_0 / L', 'Time (s)']
    print(tabulate(table_data, headers=headers, tablefmt='grid'))


if __name__ == '__main__':
    main()
