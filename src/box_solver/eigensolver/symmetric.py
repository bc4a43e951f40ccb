"""
Dense symmetric eigensolver.

Solves H v = E v for a real symmetric H by calling the LAPACK routines
?syevd (divide and conquer, default) or ?syev (QR iteration) through
scipy.linalg.lapack, so the routine's info code can be reported when the
factorization fails.
"""

import warnings
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray
from scipy.linalg.lapack import get_lapack_funcs

from box_solver.core.exceptions import DiagonalizationFailedError
from box_solver.eigensolver.hamiltonian import check_square

# driver name -> LAPACK routine suffix
_DRIVERS = {
    "evd": "syevd",
    "ev": "syev",
}

# Relative mismatch between triangles above which a warning is issued
SYMMETRY_TOL = 1e-10


@dataclass
class Spectrum:
    """
    Eigenvalues and eigenvectors of a symmetric matrix.

    Attributes:
        eigenvalues: Shape (N,), non-decreasing.
        eigenvectors: Shape (N, N). Column k is the unit eigenvector
                      belonging to eigenvalues[k].
    """
    eigenvalues: NDArray[np.floating]
    eigenvectors: NDArray[np.floating]

    @property
    def n_states(self) -> int:
        return len(self.eigenvalues)

    @property
    def ground_state_energy(self) -> float:
        """Lowest eigenvalue."""
        return float(self.eigenvalues[0])

    @property
    def ground_state_vector(self) -> NDArray[np.floating]:
        """Expansion coefficients of the ground state in the basis."""
        return self.eigenvectors[:, 0]

    def state(self, k: int) -> Tuple[float, NDArray[np.floating]]:
        """Return (energy, coefficients) of state k (0 = ground state)."""
        return float(self.eigenvalues[k]), self.eigenvectors[:, k]

    def residuals(self, H: NDArray[np.floating]) -> NDArray[np.floating]:
        """
        Relative eigen-equation residuals.

        r_k = ||H v_k - E_k v_k|| / ||H||, with the Frobenius norm of H.
        """
        H = np.asarray(H, dtype=float)
        R = H @ self.eigenvectors - self.eigenvectors * self.eigenvalues[np.newaxis, :]
        scale = np.linalg.norm(H)
        if scale == 0.0:
            scale = 1.0
        return np.linalg.norm(R, axis=0) / scale

    def orthonormality_error(self) -> float:
        """Largest entry of |VᵀV - I|."""
        V = self.eigenvectors
        return float(np.max(np.abs(V.T @ V - np.eye(V.shape[1]))))


def diagonalize(
    H: NDArray[np.floating],
    driver: str = "evd",
    lower: bool = True
) -> Spectrum:
    """
    Full eigendecomposition of a real symmetric matrix.

    Only the lower (lower=True) or upper triangle of H is read. A warning
    is issued if the other triangle does not mirror it.

    Args:
        H: Real symmetric matrix, shape (N, N).
        driver: "evd" for ?syevd or "ev" for ?syev.
        lower: Which triangle to read.

    Returns:
        Spectrum with ascending eigenvalues and orthonormal eigenvectors.

    Raises:
        ValueError: Unknown driver.
        DimensionMismatchError: H is not a square 2-D array.
        DiagonalizationFailedError: H has non-finite entries or LAPACK
            returned a nonzero info code.
    """
    if driver not in _DRIVERS:
        raise ValueError(
            f"Unknown driver {driver!r}, expected one of {sorted(_DRIVERS)}"
        )

    H = np.asarray(H, dtype=float)
    check_square(H, "H")

    if not np.all(np.isfinite(H)):
        raise DiagonalizationFailedError("H contains non-finite entries")

    scale = float(np.max(np.abs(H))) if H.size else 0.0
    asymmetry = float(np.max(np.abs(H - H.T))) if H.size else 0.0
    if asymmetry > SYMMETRY_TOL * max(scale, 1.0):
        side = "lower" if lower else "upper"
        warnings.warn(
            f"H is not symmetric (max |H - Hᵀ| = {asymmetry:.3e}); "
            f"only the {side} triangle is used"
        )

    syev, = get_lapack_funcs((_DRIVERS[driver],), (H,))
    w, v, info = syev(H, compute_v=1, lower=int(lower))

    if info < 0:
        raise DiagonalizationFailedError(
            f"{syev.typecode}{_DRIVERS[driver]}: illegal value in argument {-info}",
            code=int(info),
        )
    if info > 0:
        raise DiagonalizationFailedError(
            f"{syev.typecode}{_DRIVERS[driver]} failed to converge",
            code=int(info),
        )

    return Spectrum(eigenvalues=np.asarray(w), eigenvectors=np.asarray(v))


class SymmetricEigensolver:
    """
    Dense eigensolver for real symmetric Hamiltonians.

    Attributes:
        driver: LAPACK driver, "evd" or "ev".
        lower: Read the lower triangle if True, the upper otherwise.
        verbose: Print a summary line after each solve.
    """

    def __init__(self, driver: str = "evd", lower: bool = True, verbose: bool = False):
        if driver not in _DRIVERS:
            raise ValueError(
                f"Unknown driver {driver!r}, expected one of {sorted(_DRIVERS)}"
            )
        self.driver = driver
        self.lower = lower
        self.verbose = verbose

    def solve(self, H: NDArray[np.floating]) -> Spectrum:
        """Diagonalize H. See diagonalize()."""
        spectrum = diagonalize(H, driver=self.driver, lower=self.lower)
        if self.verbose:
            print(f"  Diagonalized {spectrum.n_states}x{spectrum.n_states} matrix "
                  f"with {_DRIVERS[self.driver]}: E_0 = {spectrum.ground_state_energy:.10f}")
        return spectrum

    def verify_eigenpairs(
        self,
        H: NDArray[np.floating],
        spectrum: Spectrum,
        tol: float = 1e-8
    ) -> Tuple[bool, float]:
        """
        Check H v_k = E_k v_k for every returned pair.

        Args:
            H: Matrix that was diagonalized.
            spectrum: Its spectrum.
            tol: Maximum allowed relative residual.

        Returns:
            Tuple of (all_within_tol, max_residual).
        """
        max_residual = float(np.max(spectrum.residuals(H)))
        return max_residual < tol, max_residual
