"""
Pytest configuration and shared fixtures for cropkit tests.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cropkit.geometry import CropState, Dimension  # noqa: E402


@pytest.fixture
def tolerance():
    """Standard floating point tolerance for geometry comparisons."""
    return 1e-6


@pytest.fixture
def landscape_image():
    """A 2:1 landscape image."""
    return Dimension(1000, 500)


@pytest.fixture
def viewport():
    """A 4:3 display surface."""
    return Dimension(800, 600)


@pytest.fixture
def small_crop():
    """Unrotated 200x100 crop centered in the landscape image."""
    return CropState(x=500, y=250, width=200, height=100, angle=0.0)
