"""Tests for the voxel-grid packing validator."""

import numpy as np
import pytest

from cubepack.algorithms.first_fit import first_fit
from cubepack.core.errors import OutOfBoundsError, OverlapError, VolumeMismatchError
from cubepack.core.geometry import Position
from cubepack.core.models import Container, Cube
from cubepack.runner.cubes import build_cubes
from cubepack.simulator.validator import occupancy_grid, validate_packing


class TestOccupancyGrid:
    def test_shape_and_empty(self):
        grid = occupancy_grid(Container(2, 3, 4))
        assert grid.shape == (2, 3, 4)
        assert not grid.any()

    def test_cube_cells_marked(self, cube_box):
        cube_box.commit(Cube(dim=2), Position(1, 1, 1))
        grid = occupancy_grid(cube_box)
        assert int(grid.sum()) == 8
        assert np.all(grid[1:3, 1:3, 1:3] == 1)
        assert grid[0, 0, 0] == 0


class TestValidatePacking:
    def test_packed_container_is_valid(self):
        container = Container(4, 4, 4)
        first_fit(container, build_cubes([16, 4, 1]))
        assert validate_packing(container)

    def test_empty_container_is_valid(self, cube_box):
        assert validate_packing(cube_box)

    def test_overlap_detected(self, cube_box):
        # commit() trusts the caller, so an overlap can be forced
        cube_box.commit(Cube(dim=2), Position(0, 0, 0))
        cube_box.commit(Cube(dim=2), Position(1, 1, 1))
        with pytest.raises(OverlapError):
            validate_packing(cube_box)

    def test_out_of_bounds_detected(self, cube_box):
        cube_box.commit(Cube(dim=2), Position(3, 0, 0))
        with pytest.raises(OutOfBoundsError):
            validate_packing(cube_box)

    def test_volume_mismatch_detected(self, cube_box):
        cube_box.commit(Cube(dim=1), Position.ORIGIN)
        cube_box.unfilled_volume += 1
        with pytest.raises(VolumeMismatchError):
            validate_packing(cube_box)
