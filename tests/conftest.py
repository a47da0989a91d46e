"""
Pytest configuration for the parameter search tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path so absolute imports work without installing
project_dir = Path(__file__).parent.parent
if str(project_dir) not in sys.path:
    sys.path.insert(0, str(project_dir))

from nonnative import ConstraintSystem, OptimizationType, ParamsConfig  # noqa: E402


@pytest.fixture
def cs() -> ConstraintSystem:
    """BN254 scalar-field context with telemetry active."""
    return ConstraintSystem("bn254_scalar", ParamsConfig(telemetry=True))


@pytest.fixture
def density_cs() -> ConstraintSystem:
    """BN254 scalar-field context optimising for density."""
    return ConstraintSystem(
        "bn254_scalar",
        ParamsConfig(optimization_type=OptimizationType.DENSITY, telemetry=True),
    )
