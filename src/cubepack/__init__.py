"""
cubepack — greedy first-fit packing of integer cubes into a box.

Public API:
    from cubepack import Container, Cube, Position, Axis, overlaps
    from cubepack import FirstFitPacker, first_fit, build_cubes, SortOrder
"""

from cubepack.algorithms.first_fit import FirstFitPacker, PackingResult, first_fit
from cubepack.core.errors import (
    CapacityExceededError,
    InvalidDimensionError,
    PackingError,
    ReCommitError,
)
from cubepack.core.geometry import Axis, Position, overlaps
from cubepack.core.models import Container, Cube
from cubepack.runner.cubes import SortOrder, build_cubes

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "Position",
    "overlaps",
    "Cube",
    "Container",
    "FirstFitPacker",
    "PackingResult",
    "first_fit",
    "SortOrder",
    "build_cubes",
    "PackingError",
    "InvalidDimensionError",
    "CapacityExceededError",
    "ReCommitError",
]
