"""Bounds safety and correctness of sub-grid extraction."""

from __future__ import annotations

import numpy as np
import pytest

from costcrop.errors import InvalidRegion
from costcrop.grid import CostGrid
from costcrop.region import Region, extract_region, validate_region


pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "region",
    [
        Region(-1, 0, 5, 5),
        Region(0, -1, 5, 5),
        Region(0, 0, 40, 5),
        Region(0, 0, 5, 30),
        Region(6, 0, 5, 5),
        Region(0, 6, 5, 5),
        Region(-10, -10, 100, 100),
    ],
)
def test_invalid_regions_are_rejected(pattern_grid: CostGrid, region: Region) -> None:
    with pytest.raises(InvalidRegion):
        extract_region(pattern_grid, region)


def test_extracted_cells_match_parent(pattern_grid: CostGrid) -> None:
    region = Region(10, 10, 19, 14)
    sub = extract_region(pattern_grid, region)

    assert (sub.width, sub.height) == (10, 5)
    for r in range(sub.height):
        for c in range(sub.width):
            assert sub.get(c, r) == pattern_grid.cells[(10 + r) * pattern_grid.width + 10 + c]


def test_extraction_does_not_alias_parent(pattern_grid: CostGrid) -> None:
    region = Region(0, 0, 4, 4)
    sub = extract_region(pattern_grid, region)
    assert not np.shares_memory(sub.cells, pattern_grid.cells)

    sub.set(0, 0, 200)
    assert pattern_grid.get(0, 0) == 0


def test_repeated_extraction_is_identical(pattern_grid: CostGrid) -> None:
    region = Region(3, 7, 21, 29)
    first = extract_region(pattern_grid, region)
    second = extract_region(pattern_grid, region)
    assert first.equals(second)


def test_single_cell_and_full_grid(pattern_grid: CostGrid) -> None:
    one = extract_region(pattern_grid, Region(39, 29, 39, 29))
    assert one.shape == (1, 1)
    assert one.get(0, 0) == pattern_grid.get(39, 29)

    full = extract_region(pattern_grid, Region(0, 0, 39, 29))
    assert full.equals(pattern_grid)


def test_from_rect_is_inclusive() -> None:
    region = Region.from_rect(100, 700, 300, 100)
    assert region == Region(100, 700, 399, 799)
    assert region.shape == (100, 300)


def test_region_helpers() -> None:
    a = Region(0, 0, 9, 9)
    assert a.overlaps(Region(9, 9, 12, 12))
    assert not a.overlaps(Region(10, 0, 12, 9))
    assert a.translate(10, 5) == Region(10, 5, 19, 14)
    assert a.contains(9, 0) and not a.contains(10, 0)


def test_validate_region_message_names_problem(pattern_grid: CostGrid) -> None:
    with pytest.raises(InvalidRegion, match="min_x > max_x"):
        validate_region(pattern_grid, Region(5, 0, 4, 0))
