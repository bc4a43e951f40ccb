"""
Pytest configuration for Box Solver test suite.
"""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from box_solver.core.parameters import BoxParameters


def pytest_configure(config):
    """Called after command line options have been parsed."""
    config.addinivalue_line(
        "markers", "integration: end-to-end runs through the CLI or scripts"
    )


@pytest.fixture
def unit_box():
    """Free unit box: N=5, L=1, mass=1, b=0."""
    return BoxParameters(N=5, L=1.0, mass=1.0, b=0.0)


@pytest.fixture
def tilted_box():
    """Box with a strong field, large enough basis to couple many states."""
    return BoxParameters(N=24, L=2.0, mass=0.5, b=30.0)
