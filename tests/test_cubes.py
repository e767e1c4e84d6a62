"""Tests for the cube-set builder."""

import pytest

from cubepack.runner.cubes import SORT_ORDERS, SortOrder, build_cubes, get_sort_order


class TestBuildCubes:
    def test_ascending_groups(self):
        cubes = build_cubes([2, 0, 1])
        assert [c.dim for c in cubes] == [1, 1, 3]

    def test_descending_groups(self):
        cubes = build_cubes([2, 0, 1], SortOrder.DESC)
        assert [c.dim for c in cubes] == [3, 1, 1]

    def test_descending_sizes_follow_descriptor_length(self):
        """Trailing zeros still count: size starts at len(counts)."""
        cubes = build_cubes([1, 1, 0, 0], SortOrder.DESC)
        assert [c.dim for c in cubes] == [2, 1]

    def test_order_accepts_plain_string(self):
        assert [c.dim for c in build_cubes([1, 1], "desc")] == [2, 1]

    def test_descriptor_not_mutated(self):
        counts = [3, 2, 1]
        build_cubes(counts, SortOrder.DESC)
        assert counts == [3, 2, 1]

    def test_ids_are_sequential(self):
        cubes = build_cubes([2, 3], SortOrder.DESC)
        assert [c.id for c in cubes] == [0, 1, 2, 3, 4]

    def test_all_unplaced(self):
        assert all(not c.is_placed for c in build_cubes([4, 4]))

    def test_empty_and_zero_descriptors(self):
        assert build_cubes([]) == []
        assert build_cubes([0, 0, 0], SortOrder.DESC) == []

    def test_large_descriptor(self):
        cubes = build_cubes([100, 10, 1])
        assert len(cubes) == 111
        assert cubes[-1].dim == 3

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError, match="size 2"):
            build_cubes([1, -1])

    def test_unknown_order_rejected(self):
        with pytest.raises(ValueError):
            build_cubes([1], "sideways")


class TestSortOrder:
    def test_registry(self):
        assert set(SORT_ORDERS) == {"asc", "desc"}

    def test_get_sort_order(self):
        assert get_sort_order("asc") is SortOrder.ASC
        assert get_sort_order(SortOrder.DESC) is SortOrder.DESC

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Available"):
            get_sort_order("random")
