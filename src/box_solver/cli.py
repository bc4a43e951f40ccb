"""
Command-line interface for the variational box solver.

Usage:
    box-solver -n 20 -L 1.0 -m 1.0 -b 10.0 --print-arrays
"""

import argparse
import sys
from typing import List, Optional

from box_solver.core.config import DEFAULT_N, DEFAULT_L, DEFAULT_MASS, DEFAULT_B
from box_solver.core.exceptions import InvalidParameterError, DiagonalizationFailedError
from box_solver.core.parameters import BoxParameters
from box_solver.core.variational import VariationalBoxSolver
from box_solver.reporting.results_reporter import ResultReporter

EXIT_OK = 0
EXIT_INVALID_PARAMETER = 2
EXIT_DIAGONALIZATION_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="box-solver",
        description="Variational energies of a particle in a box with a linear potential V(x) = b x",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  box-solver                        # defaults from defaults.json
  box-solver -n 30 -b 50            # 30 basis functions, slope 50
  box-solver -n 4 -b 1 --print-arrays
  box-solver -n 40 -b 100 --report outputs/box_b100.txt
        """
    )

    # Each flag maps onto one BoxParameters field via dest
    parser.add_argument(
        "-n", "--basis-size",
        type=int,
        default=DEFAULT_N,
        dest="N",
        help=f"Number of box eigenfunctions in the basis (default: {DEFAULT_N})"
    )
    parser.add_argument(
        "-L", "--length",
        type=float,
        default=DEFAULT_L,
        dest="L",
        help=f"Box length (default: {DEFAULT_L})"
    )
    parser.add_argument(
        "-m", "--mass",
        type=float,
        default=DEFAULT_MASS,
        dest="mass",
        help=f"Particle mass (default: {DEFAULT_MASS})"
    )
    parser.add_argument(
        "-b", "--slope",
        type=float,
        default=DEFAULT_B,
        dest="b",
        help=f"Slope of the linear potential (default: {DEFAULT_B})"
    )
    parser.add_argument(
        "--driver",
        type=str,
        choices=["evd", "ev"],
        default="evd",
        help="LAPACK driver: 'evd' (divide and conquer) or 'ev' (QR) (default: evd)"
    )
    parser.add_argument(
        "--print-arrays",
        action="store_true",
        dest="print_arrays",
        help="Print the T, V and H matrices"
    )
    parser.add_argument(
        "--states",
        type=int,
        default=None,
        help="Number of states to list (default: all)"
    )
    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Also write the report to this file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress for each stage"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        params = BoxParameters(N=args.N, L=args.L, mass=args.mass, b=args.b)
        solver = VariationalBoxSolver(params, driver=args.driver, verbose=args.verbose)
        result = solver.solve()
    except InvalidParameterError as e:
        print(f"ERROR: invalid parameter: {e}", file=sys.stderr)
        return EXIT_INVALID_PARAMETER
    except DiagonalizationFailedError as e:
        print(f"ERROR: diagonalization failed: {e}", file=sys.stderr)
        return EXIT_DIAGONALIZATION_FAILED

    reporter = ResultReporter()
    print(reporter.generate_report(result, show_arrays=args.print_arrays,
                                   n_states=args.states))

    if args.report:
        path = reporter.save_report(result, args.report, show_arrays=args.print_arrays,
                                    n_states=args.states)
        print(f"Report saved to: {path}")

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
