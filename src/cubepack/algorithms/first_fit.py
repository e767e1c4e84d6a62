"""
Greedy first-fit placement engine.

Algorithm:
  1. Walk the cubes in the given order.
  2. Stop the pass as soon as the container has no unfilled volume left.
  3. Empty container: the only candidate is the origin.
     Otherwise: for each axis X, Y, Z and each placed cube P (commit order),
     try P's position pushed by P.dim along that axis.
  4. Commit the first candidate that fits; else set the cube aside.
  5. Repeat with the set-aside cubes while a pass placed at least one cube.

The heuristic is not optimal: it only ever looks at positions flush against
an already placed cube, so it can miss packings that exist.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from cubepack.core.geometry import Axis, Position
from cubepack.core.models import Container, Cube


@dataclass
class PackingResult:
    """Outcome of one packing run against a container."""

    placed_count: int
    filled_volume: int
    unfilled_volume: int
    passes: int
    unplaced: List[Cube] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        """True when the container ended up completely filled."""
        return self.unfilled_volume == 0

    def to_dict(self) -> dict:
        return {
            "placed_count": self.placed_count,
            "filled_volume": self.filled_volume,
            "unfilled_volume": self.unfilled_volume,
            "passes": self.passes,
            "unplaced": len(self.unplaced),
            "solved": self.solved,
        }


def candidate_positions(container: Container) -> Iterator[Position]:
    """Yield candidate corners in tie-break order (axis first, then commit order)."""
    if not container.cubes:
        yield Position.ORIGIN
        return
    for axis in Axis:
        for placed in container.cubes:
            yield placed.position.shifted(axis, placed.dim)


def find_position(container: Container, cube: Cube) -> Optional[Position]:
    """First candidate position where *cube* fits, or None."""
    for position in candidate_positions(container):
        if container.fits(cube, position):
            return position
    return None


class FirstFitPacker:
    """
    Greedy first-fit packer with retry passes.

    One ``pack()`` call processes one complete batch of cubes against one
    container; the container keeps the result.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def pack(self, container: Container, cubes: Sequence[Cube]) -> PackingResult:
        """
        Place as many of *cubes* as possible into *container*.

        Args:
            container: Target container (may already hold cubes).
            cubes:     Unplaced cubes in processing order.

        Returns:
            PackingResult describing the final container state.
        """
        remaining = list(cubes)
        passes = 0

        while remaining:
            passes += 1
            set_aside, unvisited = self._run_pass(container, remaining)

            if self.verbose:
                placed = len(remaining) - len(set_aside) - len(unvisited)
                print(
                    f"  pass {passes}: placed {placed}/{len(remaining)}, "
                    f"unfilled {container.unfilled_volume}"
                )

            if unvisited:
                # Container filled up mid-pass
                remaining = set_aside + unvisited
                break
            if not set_aside or len(set_aside) == len(remaining):
                remaining = set_aside
                break
            remaining = set_aside

        return PackingResult(
            placed_count=container.placed_count,
            filled_volume=container.filled_volume,
            unfilled_volume=container.unfilled_volume,
            passes=passes,
            unplaced=remaining,
        )

    def _run_pass(self, container: Container, cubes: List[Cube]):
        """Single pass; returns (set-aside cubes, cubes never visited)."""
        set_aside: List[Cube] = []
        for index, cube in enumerate(cubes):
            if container.is_full:
                return set_aside, cubes[index:]
            position = find_position(container, cube)
            if position is None:
                set_aside.append(cube)
            else:
                container.commit(cube, position)
        return set_aside, []


def first_fit(container: Container, cubes: Sequence[Cube], verbose: bool = False) -> PackingResult:
    """Convenience wrapper around ``FirstFitPacker().pack()``."""
    return FirstFitPacker(verbose=verbose).pack(container, cubes)
