"""Core data models: cubes and the container they are packed into."""

from dataclasses import dataclass
from typing import List, Optional

from cubepack.core.errors import (
    CapacityExceededError,
    InvalidDimensionError,
    ReCommitError,
)
from cubepack.core.geometry import Axis, Position, extents_overlap


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionError(f"{name} must be a positive integer, got {value!r}")


@dataclass(eq=False)
class Cube:
    """
    An axis-aligned cube with integer edge length.

    ``position`` stays None until a Container commits the cube; after that it
    never changes.  Cubes compare by identity so two equal-sized cubes are
    still distinct items of the multiset.
    """

    dim: int
    id: int = 0
    position: Optional[Position] = None

    def __post_init__(self) -> None:
        _check_dimension("Cube dim", self.dim)

    @property
    def volume(self) -> int:
        return self.dim ** 3

    @property
    def is_placed(self) -> bool:
        return self.position is not None

    def far_corner(self) -> Optional[Position]:
        """Corner opposite ``position`` (position + dim on every axis)."""
        if self.position is None:
            return None
        return Position(
            self.position.x + self.dim,
            self.position.y + self.dim,
            self.position.z + self.dim,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "dim": self.dim,
            "position": self.position.to_dict() if self.position else None,
        }

    def __repr__(self) -> str:
        where = self.position.to_tuple() if self.position else "unplaced"
        return f"Cube(id={self.id}, {self.dim}³, {where})"


class Container:
    """
    Fixed-size rectangular box that cubes are packed into.

    Tracks the placed cubes in commit order (the placement engine derives
    candidate positions from that order) together with the filled and
    unfilled volume.  ``filled_volume + unfilled_volume == volume`` holds
    after every operation.
    """

    def __init__(self, length: int, width: int, height: int):
        _check_dimension("Container length", length)
        _check_dimension("Container width", width)
        _check_dimension("Container height", height)
        self.length = length
        self.width = width
        self.height = height
        self.filled_volume = 0
        self.unfilled_volume = length * width * height
        self.cubes: List[Cube] = []

    @property
    def volume(self) -> int:
        return self.length * self.width * self.height

    @property
    def placed_count(self) -> int:
        return len(self.cubes)

    @property
    def is_full(self) -> bool:
        return self.unfilled_volume == 0

    @property
    def fill_rate(self) -> float:
        """Filled fraction of the container volume (0.0 - 1.0)."""
        return self.filled_volume / self.volume

    def extent(self, axis: Axis) -> int:
        """Container size along *axis*."""
        if axis is Axis.X:
            return self.length
        if axis is Axis.Y:
            return self.width
        return self.height

    def fits(self, cube: Cube, position: Position) -> bool:
        """
        Check whether *cube* could be placed at *position*.

        Pure predicate: the cube is not modified whatever the outcome.
        """
        for axis in Axis:
            start = position.get(axis)
            if start < 0 or start + cube.dim > self.extent(axis):
                return False

        for placed in self.cubes:
            if extents_overlap(placed.position, placed.dim, position, cube.dim):
                return False
        return True

    def commit(self, cube: Cube, position: Position) -> None:
        """
        Place *cube* at *position* and account for its volume.

        The caller must have just checked ``fits(cube, position)``; the
        overlap test is not repeated here.

        Raises:
            ReCommitError:         cube already has a position.
            CapacityExceededError: cube volume exceeds the unfilled volume.
        """
        if cube.is_placed:
            raise ReCommitError(f"{cube!r} is already placed")
        if cube.volume > self.unfilled_volume:
            raise CapacityExceededError(
                f"{cube!r} needs {cube.volume} but only "
                f"{self.unfilled_volume} is unfilled"
            )
        cube.position = position
        self.cubes.append(cube)
        self.unfilled_volume -= cube.volume
        self.filled_volume += cube.volume

    def __repr__(self) -> str:
        return (
            f"Container({self.length}×{self.width}×{self.height}, "
            f"cubes={self.placed_count}, "
            f"filled={self.filled_volume}/{self.volume}, "
            f"fill={self.fill_rate:.1%})"
        )
