"""
Geometry primitives — integer positions, axes and the overlap test.

All volumes in cubepack are axis-aligned integer cubes, so a volume is fully
described by its near corner (a Position) and its edge length (dim).

Overlap is strict: two cubes that only share a face, an edge or a corner do
NOT overlap.  The 3D test is the conjunction of three 2D projection tests
(X-Y, Y-Z, X-Z); each axis appears in two of the three pairs.

Usage:
    from cubepack.core.geometry import Axis, Position, overlaps
    p = Position(0, 0, 0).shifted(Axis.X, 2)   # Position(x=2, y=0, z=0)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, ClassVar, Tuple

if TYPE_CHECKING:
    from cubepack.core.models import Cube


class Axis(IntEnum):
    """Coordinate axis.  Iteration order (X, Y, Z) is the candidate order."""
    X = 0
    Y = 1
    Z = 2


# The three projection planes checked by the overlap test
AXIS_PAIRS: Tuple[Tuple[Axis, Axis], ...] = (
    (Axis.X, Axis.Y),
    (Axis.Y, Axis.Z),
    (Axis.X, Axis.Z),
)


@dataclass(frozen=True)
class Position:
    """
    A 3D integer point: the near (minimum) corner of a cube.

    Frozen so a committed cube's position can be shared without copying.
    """
    x: int
    y: int
    z: int

    ORIGIN: ClassVar["Position"]

    def get(self, axis: Axis) -> int:
        """Coordinate along *axis*."""
        if axis is Axis.X:
            return self.x
        if axis is Axis.Y:
            return self.y
        return self.z

    def shifted(self, axis: Axis, offset: int) -> "Position":
        """New position moved by *offset* along *axis* only."""
        if axis is Axis.X:
            return Position(self.x + offset, self.y, self.z)
        if axis is Axis.Y:
            return Position(self.x, self.y + offset, self.z)
        return Position(self.x, self.y, self.z + offset)

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, d: dict) -> "Position":
        return cls(x=d["x"], y=d["y"], z=d["z"])


Position.ORIGIN = Position(0, 0, 0)


def intersects_on(
    pos_a: Position, dim_a: int,
    pos_b: Position, dim_b: int,
    axis1: Axis, axis2: Axis,
) -> bool:
    """True if the projections of A and B onto the (axis1, axis2) plane intersect."""
    for axis in (axis1, axis2):
        a = pos_a.get(axis)
        b = pos_b.get(axis)
        if not (a < b + dim_b and a + dim_a > b):
            return False
    return True


def extents_overlap(pos_a: Position, dim_a: int, pos_b: Position, dim_b: int) -> bool:
    """3D overlap of two cube extents given as (corner, edge length)."""
    return all(
        intersects_on(pos_a, dim_a, pos_b, dim_b, axis1, axis2)
        for axis1, axis2 in AXIS_PAIRS
    )


def overlaps(cube_a: "Cube", cube_b: "Cube") -> bool:
    """
    True if two placed cubes share interior volume.

    An unplaced cube never overlaps anything.
    """
    if cube_a.position is None or cube_b.position is None:
        return False
    return extents_overlap(cube_a.position, cube_a.dim, cube_b.position, cube_b.dim)
