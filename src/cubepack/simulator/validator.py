"""
Packing validator — independent check of a finished container.

The placement engine trusts Container.fits() and never re-checks a commit.
This module re-derives the packing from scratch on a voxel grid so the
invariants can be verified without reusing the overlap predicate.

Checks:
  1. Volume: filled + unfilled == container volume
  2. Bounds: every placed cube lies inside the container
  3. Overlap: no voxel is covered by more than one cube
  4. Coverage: covered voxels == filled volume
"""

import numpy as np

from cubepack.core.errors import OutOfBoundsError, OverlapError, VolumeMismatchError
from cubepack.core.models import Container


def occupancy_grid(container: Container) -> np.ndarray:
    """
    Voxel grid (length × width × height) counting the cubes covering each cell.

    Positions must be non-negative; parts beyond the far walls are clipped.
    """
    grid = np.zeros((container.length, container.width, container.height), dtype=np.int32)
    for cube in container.cubes:
        p = cube.position
        grid[p.x:p.x + cube.dim, p.y:p.y + cube.dim, p.z:p.z + cube.dim] += 1
    return grid


def validate_packing(container: Container) -> bool:
    """
    Validate a container against all packing invariants.

    Returns:
        True if all checks pass.

    Raises:
        VolumeMismatchError: volume bookkeeping is inconsistent.
        OutOfBoundsError:    a cube is unplaced or extends outside the container.
        OverlapError:        two cubes share a voxel.
    """
    if container.filled_volume + container.unfilled_volume != container.volume:
        raise VolumeMismatchError(
            f"filled {container.filled_volume} + unfilled "
            f"{container.unfilled_volume} != volume {container.volume}"
        )

    limits = (container.length, container.width, container.height)
    for cube in container.cubes:
        if cube.position is None:
            raise OutOfBoundsError(f"{cube!r} is in the container without a position")
        corner = cube.position.to_tuple()
        if min(corner) < 0 or any(c + cube.dim > lim for c, lim in zip(corner, limits)):
            raise OutOfBoundsError(f"{cube!r} extends outside {limits}")

    grid = occupancy_grid(container)
    if int(grid.max()) > 1:
        cell = tuple(int(v) for v in np.argwhere(grid > 1)[0])
        raise OverlapError(f"Voxel {cell} is covered by {int(grid[cell])} cubes")

    covered = int(np.count_nonzero(grid))
    if covered != container.filled_volume:
        raise VolumeMismatchError(
            f"Cubes cover {covered} voxels but filled volume is {container.filled_volume}"
        )
    return True
