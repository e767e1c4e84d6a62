"""Shared fixtures for the cubepack test suite."""

import os
import sys

import pytest

# Ensure the src/ tree is importable without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from cubepack.core.models import Container


@pytest.fixture
def cube_box():
    """Empty 4×4×4 container."""
    return Container(4, 4, 4)


@pytest.fixture
def unit_box():
    """Empty 2×2×2 container, exactly eight unit cubes."""
    return Container(2, 2, 2)
