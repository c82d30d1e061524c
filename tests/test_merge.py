"""Merge-back locality and round trips."""

from __future__ import annotations

import numpy as np
import pytest

from costcrop.errors import InvalidRegion, ShapeMismatch
from costcrop.grid import CostGrid
from costcrop.inflation import inflate_region
from costcrop.kernel import uniform_kernel
from costcrop.merge import merge_region
from costcrop.region import Region, extract_region


pytestmark = pytest.mark.unit


def test_merge_only_touches_region(pattern_grid: CostGrid) -> None:
    region = Region(5, 8, 14, 12)
    before = pattern_grid.as_array().copy()
    sub = CostGrid.zeros(region.width, region.height, fill=77)

    out = merge_region(pattern_grid, region, sub)

    assert out is pattern_grid
    after = pattern_grid.as_array()
    inside = np.zeros(after.shape, dtype=bool)
    inside[region.slices()] = True
    np.testing.assert_array_equal(after[~inside], before[~inside])
    assert np.all(after[inside] == 77)


def test_round_trip_is_noop(pattern_grid: CostGrid) -> None:
    region = Region(1, 2, 33, 27)
    before = pattern_grid.copy()
    merge_region(pattern_grid, region, extract_region(pattern_grid, region))
    assert pattern_grid.equals(before)


def test_shape_mismatch_leaves_grid_untouched(pattern_grid: CostGrid) -> None:
    before = pattern_grid.copy()
    with pytest.raises(ShapeMismatch):
        merge_region(pattern_grid, Region(0, 0, 9, 9), CostGrid.zeros(9, 10))
    assert pattern_grid.equals(before)


def test_invalid_region_leaves_grid_untouched(pattern_grid: CostGrid) -> None:
    before = pattern_grid.copy()
    with pytest.raises(InvalidRegion):
        merge_region(pattern_grid, Region(35, 0, 44, 9), CostGrid.zeros(10, 10))
    assert pattern_grid.equals(before)


def test_inflate_region_stays_inside_region() -> None:
    grid = CostGrid.zeros(20, 20)
    grid.set(10, 10, 250)
    inflate_region(grid, Region(10, 0, 19, 19), 250, uniform_kernel(5), 100)

    arr = grid.as_array()
    assert np.all(arr[:, :10] == 0)
    assert np.all(arr[8:13, 10:13] != 0)
    assert arr[10, 10] == 250
    assert int(np.count_nonzero(arr == 100)) == 5 * 3 - 1
