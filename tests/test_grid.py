"""Tests for the row-major cost grid."""

from __future__ import annotations

import numpy as np
import pytest

from costcrop.grid import CostGrid


pytestmark = pytest.mark.unit


def test_index_is_row_major(pattern_grid: CostGrid) -> None:
    assert pattern_grid.index(0, 0) == 0
    assert pattern_grid.index(3, 2) == 2 * 40 + 3
    assert pattern_grid.get(3, 2) == (2 * 40 + 3) % 256
    assert pattern_grid.as_array()[2, 3] == pattern_grid.get(3, 2)


@pytest.mark.parametrize("col,row", [(-1, 0), (0, -1), (40, 0), (0, 30)])
def test_index_rejects_out_of_bounds(pattern_grid: CostGrid, col: int, row: int) -> None:
    with pytest.raises(IndexError):
        pattern_grid.index(col, row)


def test_set_writes_through_to_buffer() -> None:
    grid = CostGrid.zeros(5, 4)
    grid.set(4, 3, 7)
    assert grid.cells[3 * 5 + 4] == 7
    with pytest.raises(ValueError):
        grid.set(0, 0, 256)


def test_builders_copy_input() -> None:
    arr = np.zeros((3, 4), dtype=np.uint8)
    grid = CostGrid.from_array(arr)
    arr[0, 0] = 9
    assert grid.get(0, 0) == 0
    assert grid.shape == (3, 4)

    buf = np.arange(12, dtype=np.uint8)
    flat = CostGrid.from_buffer(4, 3, buf)
    buf[:] = 0
    assert flat.get(3, 2) == 11


def test_copy_is_independent(pattern_grid: CostGrid) -> None:
    clone = pattern_grid.copy()
    clone.set(0, 0, 255)
    assert pattern_grid.get(0, 0) == 0
    assert not clone.equals(pattern_grid)


def test_invalid_construction() -> None:
    with pytest.raises(ValueError):
        CostGrid.zeros(0, 3)
    with pytest.raises(ValueError, match="length"):
        CostGrid.from_buffer(3, 3, np.zeros(8, dtype=np.uint8))
    with pytest.raises(ValueError, match=r"\[0, 255\]"):
        CostGrid.from_array(np.full((2, 2), 300))
    with pytest.raises(ValueError):
        CostGrid(width=2, height=2, cells=np.zeros(4, dtype=np.int32))
