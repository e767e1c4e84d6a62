"""Cube-set builder: expand a run-length descriptor into an ordered cube list."""

from enum import Enum
from typing import List, Sequence

from cubepack.core.models import Cube


class SortOrder(str, Enum):
    """Order in which size groups are emitted."""
    ASC = "asc"
    DESC = "desc"


def build_cubes(counts: Sequence[int], order: SortOrder = SortOrder.ASC) -> List[Cube]:
    """
    Create the cubes described by *counts*.

    ``counts[i]`` is the number of cubes with edge length ``i + 1``.  For
    ``[100, 10, 1]`` this yields 100 cubes of 1³, 10 of 2³ and 1 of 3³
    (ascending), or the same groups largest-first (descending).

    Args:
        counts: Non-negative count per size class, smallest size first.
        order:  Size order of the resulting list.

    Returns:
        Unplaced cubes, each size group contiguous, ids numbered from 0.

    Raises:
        ValueError: If a count is negative.
    """
    order = SortOrder(order)
    for index, count in enumerate(counts):
        if count < 0:
            raise ValueError(f"Cube count for size {index + 1} is negative: {count}")

    if order is SortOrder.DESC:
        groups = [(len(counts) - i, count) for i, count in enumerate(reversed(counts))]
    else:
        groups = [(i + 1, count) for i, count in enumerate(counts)]

    cubes: List[Cube] = []
    for dim, count in groups:
        start = len(cubes)
        cubes.extend([Cube(dim=dim, id=start + n) for n in range(count)])
    return cubes


SORT_ORDERS = {order.value: order for order in SortOrder}


def get_sort_order(name: str) -> SortOrder:
    """
    Resolve a sort order by name.

    Raises:
        ValueError: If the name is not recognised.
    """
    if name not in SORT_ORDERS:
        raise ValueError(
            f"Unknown sort order: {name}. "
            f"Available: {list(SORT_ORDERS.keys())}"
        )
    return SORT_ORDERS[name]
