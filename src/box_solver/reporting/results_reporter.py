"""
Results reporter for box solver runs.

Formats the kinetic, potential and Hamiltonian matrices, the computed
spectrum and the stage timings as plain-text tables.
"""

import platform
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np
from numpy.typing import NDArray
from tabulate import tabulate

from box_solver.core.variational import VariationalResult
from box_solver.eigensolver.symmetric import Spectrum
from box_solver.analysis.spectrum import exact_box_energies


class ResultReporter:
    """
    Turns a VariationalResult into a human-readable report.

    Attributes:
        precision: Digits after the decimal point for matrix entries and energies.
        tablefmt: tabulate table format.
    """

    def __init__(self, precision: int = 6, tablefmt: str = 'grid'):
        self.precision = precision
        self.tablefmt = tablefmt

    @property
    def _floatfmt(self) -> str:
        return f".{self.precision}f"

    def format_matrix(self, M: NDArray[np.floating], title: str = "") -> str:
        """Table of M with rows and columns labelled by quantum number."""
        N = M.shape[0]
        headers = ['n'] + [str(j) for j in range(1, M.shape[1] + 1)]
        rows = [[i + 1] + list(M[i]) for i in range(N)]
        table = tabulate(rows, headers=headers, tablefmt=self.tablefmt,
                         floatfmt=self._floatfmt)
        if title:
            return f"{title}\n{table}"
        return table

    def format_spectrum(
        self,
        spectrum: Spectrum,
        n_states: Optional[int] = None,
        reference: Optional[NDArray[np.floating]] = None
    ) -> str:
        """
        Table of the lowest eigenvalues.

        Args:
            spectrum: Spectrum to report.
            n_states: How many states to list. Defaults to all.
            reference: Optional reference energies (e.g. the free box) shown
                       alongside for comparison.
        """
        if n_states is None:
            n_states = spectrum.n_states
        n_states = min(n_states, spectrum.n_states)

        table_data = []
        for k in range(n_states):
            coeffs = spectrum.eigenvectors[:, k]
            dominant = int(np.argmax(np.abs(coeffs))) + 1
            row = [k, spectrum.eigenvalues[k], dominant, coeffs[dominant - 1]**2]
            if reference is not None:
                row.append(reference[k])
                row.append(spectrum.eigenvalues[k] - reference[k])
            table_data.append(row)

        headers = ['State', 'Energy', 'Dominant n', 'Weight']
        if reference is not None:
            headers += ['Free box', 'Shift']
        return tabulate(table_data, headers=headers, tablefmt=self.tablefmt,
                        floatfmt=self._floatfmt)

    def format_timings(self, timings: Dict[str, float]) -> str:
        table_data = [[stage, seconds] for stage, seconds in timings.items()]
        table_data.append(['total', sum(timings.values())])
        return tabulate(table_data, headers=['Stage', 'Time (s)'],
                        tablefmt=self.tablefmt, floatfmt=".6f")

    def generate_report(
        self,
        result: VariationalResult,
        show_arrays: bool = False,
        n_states: Optional[int] = None
    ) -> str:
        """
        Full report of one calculation.

        Args:
            result: Result from VariationalBoxSolver.solve().
            show_arrays: Include T, V and H tables.
            n_states: Number of states in the spectrum table.

        Returns:
            Report text.
        """
        p = result.params
        lines = []
        lines.append("=" * 80)
        lines.append("PARTICLE IN A BOX WITH LINEAR POTENTIAL - VARIATIONAL RESULTS")
        lines.append("=" * 80)
        lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append(f"Python: {platform.python_version()}")
        lines.append("")

        param_table = [
            ['Basis size N', p.N],
            ['Box length L', p.L],
            ['Mass', p.mass],
            ['Slope b', p.b],
        ]
        lines.append(tabulate(param_table, headers=['Parameter', 'Value'],
                              tablefmt=self.tablefmt))
        lines.append("")

        if show_arrays:
            lines.append(self.format_matrix(result.kinetic, "KINETIC ENERGY MATRIX T"))
            lines.append("")
            lines.append(self.format_matrix(result.potential, "POTENTIAL ENERGY MATRIX V"))
            lines.append("")
            lines.append(self.format_matrix(result.hamiltonian, "HAMILTONIAN MATRIX H"))
            lines.append("")

        lines.append("-" * 80)
        lines.append("SPECTRUM")
        lines.append("-" * 80)
        reference = exact_box_energies(p.N, p.L, p.mass)
        lines.append(self.format_spectrum(result.spectrum, n_states, reference))
        lines.append("")
        lines.append(f"Ground state energy: {result.ground_state_energy:.{self.precision}f}")
        lines.append("")

        if result.timings:
            lines.append("-" * 80)
            lines.append("TIMING")
            lines.append("-" * 80)
            lines.append(self.format_timings(result.timings))
            lines.append("")

        return "\n".join(lines)

    def save_report(
        self,
        result: VariationalResult,
        path: Union[str, Path],
        show_arrays: bool = False,
        n_states: Optional[int] = None
    ) -> Path:
        """Write the report to a UTF-8 text file and return its path."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.generate_report(result, show_arrays, n_states))
        return path
