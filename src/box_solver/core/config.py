"""
Default calculation parameters for the box solver.

Defaults for the basis size N, box length L, particle mass and potential
slope b are loaded from defaults.json if available, otherwise the built-in
values below are used.
"""

import json
import warnings
from pathlib import Path
from typing import Dict, Any

from box_solver.core.box_model import check_basis_size, check_real
from box_solver.core.exceptions import InvalidParameterError

# =============================================================================
# Load Default Parameters from JSON
# =============================================================================

# Path to defaults.json (same directory as this file)
_DEFAULTS_JSON_PATH = Path(__file__).parent / "defaults.json"

# Built-in defaults (used if defaults.json is missing or unreadable)
_BUILTIN_DEFAULTS: Dict[str, Any] = {
    "N": 10,      # basis size (number of box eigenfunctions)
    "L": 1.0,     # box length
    "mass": 1.0,  # particle mass
    "b": 0.0,     # slope of the linear potential V(x) = b x
}

# Check applied to each value read from the file
_VALUE_CHECKS = {
    "N": check_basis_size,
    "L": lambda v: check_real("L", v, positive=True),
    "mass": lambda v: check_real("mass", v, positive=True),
    "b": lambda v: check_real("b", v),
}


def load_defaults_from_json(path: Path = _DEFAULTS_JSON_PATH) -> Dict[str, Any]:
    """
    Load default parameters from a JSON file.

    Keys missing from the file are filled in from the built-in defaults.
    If the file doesn't exist the built-in defaults are returned; if it
    exists but cannot be parsed a warning is issued and the built-in
    defaults are returned. A value of the wrong type or out of range
    (e.g. "N": "ten" or "L": null) is replaced by its built-in default,
    also with a warning.

    Args:
        path: JSON file to read. Defaults to defaults.json beside this module.

    Returns:
        Dictionary with keys 'N', 'L', 'mass' and 'b'.
    """
    path = Path(path)
    if not path.exists():
        return _BUILTIN_DEFAULTS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        warnings.warn(f"Failed to load {path.name}: {e}. Using built-in defaults.")
        return _BUILTIN_DEFAULTS.copy()

    if not isinstance(loaded, dict):
        warnings.warn(f"{path.name} does not contain a JSON object. Using built-in defaults.")
        return _BUILTIN_DEFAULTS.copy()

    result = _BUILTIN_DEFAULTS.copy()
    for key, value in loaded.items():
        if key not in _BUILTIN_DEFAULTS:
            continue
        try:
            _VALUE_CHECKS[key](value)
        except InvalidParameterError as e:
            warnings.warn(
                f"Invalid {key!r} in {path.name}: {e}. "
                f"Using built-in default {_BUILTIN_DEFAULTS[key]!r}."
            )
            continue
        result[key] = value if key == "N" else float(value)
    return result


def save_defaults_to_json(defaults: Dict[str, Any], path: Path = _DEFAULTS_JSON_PATH) -> None:
    """
    Save default parameters to a JSON file.

    Args:
        defaults: Dictionary with keys 'N', 'L', 'mass' and 'b'.
        path: Destination file. Defaults to defaults.json beside this module.
    """
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(defaults, f, indent=4)


def get_defaults_json_path() -> Path:
    """Return the path to the defaults.json file."""
    return _DEFAULTS_JSON_PATH


# Load defaults at module import time
_LOADED_DEFAULTS = load_defaults_from_json()

DEFAULT_N: int = int(_LOADED_DEFAULTS["N"])
DEFAULT_L: float = float(_LOADED_DEFAULTS["L"])
DEFAULT_MASS: float = float(_LOADED_DEFAULTS["mass"])
DEFAULT_B: float = float(_LOADED_DEFAULTS["b"])
