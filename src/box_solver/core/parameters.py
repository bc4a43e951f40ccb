"""
Parameters dataclass for configuring a variational box calculation.

A calculation is fully described by the basis size N, the box length L,
the particle mass and the slope b of the linear potential V(x) = b x.
"""

from dataclasses import dataclass, asdict, replace as _dc_replace
from typing import Dict, Any

from box_solver.core.config import DEFAULT_N, DEFAULT_L, DEFAULT_MASS, DEFAULT_B
from box_solver.core.box_model import validate_box_inputs, box_energy_scale


@dataclass(frozen=True)
class BoxParameters:
    """
    Parameters of a particle in a box with a linear potential.

    Natural units (ħ = 1) are used throughout.

    Attributes:
        N: Basis size, the number of box eigenfunctions φ_1..φ_N.
        L: Box length. The box spans [0, L].
        mass: Particle mass.
        b: Slope of the added potential V(x) = b x.
    """

    N: int = DEFAULT_N
    L: float = DEFAULT_L
    mass: float = DEFAULT_MASS
    b: float = DEFAULT_B

    def __post_init__(self):
        """Validate parameters after initialization."""
        validate_box_inputs(self.N, self.L, self.mass, self.b)

    @property
    def energy_scale(self) -> float:
        """
        Ground-state energy of the bare box.

        E_1 = π² / (2 m L²), so that E_n = E_1 n².
        """
        return box_energy_scale(self.L, self.mass)

    def replace(self, **changes) -> "BoxParameters":
        """Return a validated copy with the given fields changed."""
        return _dc_replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoxParameters":
        """
        Build parameters from a mapping, ignoring unknown keys.

        Missing keys take their default values.
        """
        known = {k: data[k] for k in ("N", "L", "mass", "b") if k in data}
        return cls(**known)

    def __repr__(self) -> str:
        return (
            f"BoxParameters(N={self.N}, L={self.L:g}, "
            f"mass={self.mass:g}, b={self.b:g})"
        )
