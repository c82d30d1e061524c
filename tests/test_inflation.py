"""Kernel-weighted inflation of occupied cells."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from scipy import ndimage

from costcrop.errors import InvalidKernel, InvalidValue
from costcrop.grid import CostGrid
from costcrop.inflation import build_mask, dilate_mask, inflate, kernel_response
from costcrop.kernel import ellipse_kernel, gaussian_kernel, kernel_from_weights, uniform_kernel


pytestmark = pytest.mark.unit

OCC = 250
INF = 100


def _random_grid(seed: int, width: int = 37, height: int = 23) -> CostGrid:
    rng = np.random.default_rng(seed)
    arr = rng.choice([0, 0, 0, 0, 0, 0, 30, OCC], size=(height, width)).astype(np.uint8)
    return CostGrid.from_array(arr)


def test_inflate_is_in_place() -> None:
    grid = CostGrid.zeros(5, 5)
    grid.set(2, 2, OCC)
    out = inflate(grid, OCC, uniform_kernel(3), INF)
    assert out is grid
    assert grid.get(1, 1) == INF


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_occupied_cells_are_preserved(seed: int) -> None:
    grid = _random_grid(seed)
    before = grid.as_array() == OCC
    inflate(grid, OCC, gaussian_kernel(7, sigma=2.0), INF)
    after = grid.as_array()
    assert np.all(after[before] == OCC)
    assert np.all(after[~before] != OCC)


@pytest.mark.parametrize(
    "kernel",
    [uniform_kernel(3), uniform_kernel(5), gaussian_kernel(7, sigma=1.5), gaussian_kernel(9, sigma=0.0)],
)
@pytest.mark.parametrize("center", [(6, 5), (0, 0), (14, 11), (1, 10)])
def test_single_cell_footprint(kernel, center: tuple[int, int]) -> None:
    width, height = 15, 12
    c0, r0 = center
    grid = CostGrid.zeros(width, height)
    grid.set(c0, r0, OCC)

    inflate(grid, OCC, kernel, INF)

    half = kernel.half
    for row in range(height):
        for col in range(width):
            chebyshev = max(abs(row - r0), abs(col - c0))
            value = grid.get(col, row)
            if chebyshev == 0:
                assert value == OCC
            elif chebyshev <= half:
                assert value == INF, (col, row)
            else:
                assert value == 0, (col, row)


def test_kernel_larger_than_subgrid_is_clipped() -> None:
    grid = CostGrid.zeros(3, 2)
    grid.set(0, 0, OCC)
    inflate(grid, OCC, uniform_kernel(51), INF)
    expected = np.array([[OCC, INF, INF], [INF, INF, INF]], dtype=np.uint8)
    np.testing.assert_array_equal(grid.as_array(), expected)


def test_boundary_taps_contribute_zero() -> None:
    mask = np.ones((4, 4), dtype=bool)
    response = kernel_response(mask, uniform_kernel(3))
    assert response[0, 0] == pytest.approx(4.0)
    assert response[0, 1] == pytest.approx(6.0)
    assert response[1, 1] == pytest.approx(9.0)


@pytest.mark.parametrize("seed", [3, 4])
@pytest.mark.parametrize("kernel", [uniform_kernel(5), ellipse_kernel(7), ellipse_kernel(11)])
def test_dilation_matches_binary_dilation_with_zero_border(seed: int, kernel) -> None:
    rng = np.random.default_rng(seed)
    mask = rng.random((31, 26)) < 0.05
    expected = ndimage.binary_dilation(mask, structure=kernel.support(), border_value=0)
    np.testing.assert_array_equal(dilate_mask(mask, kernel), expected)


def test_zero_weight_taps_do_not_spread() -> None:
    weights = np.zeros((5, 5))
    weights[2, 2] = 1.0
    grid = _random_grid(7)
    before = grid.as_array().copy()
    inflate(grid, OCC, kernel_from_weights(weights), INF)
    np.testing.assert_array_equal(grid.as_array(), before)


def test_offset_direction_follows_response_definition() -> None:
    weights = np.zeros((3, 3))
    weights[1, 2] = 1.0  # dr = 0, dc = +1
    grid = CostGrid.zeros(9, 9)
    grid.set(5, 5, OCC)
    inflate(grid, OCC, kernel_from_weights(weights), INF)
    assert grid.get(4, 5) == INF
    assert grid.get(6, 5) == 0
    assert int(np.count_nonzero(grid.cells == INF)) == 1


def test_other_costs_inside_footprint_are_overwritten() -> None:
    grid = CostGrid.zeros(7, 7, fill=30)
    grid.set(3, 3, OCC)
    inflate(grid, OCC, uniform_kernel(3), INF)
    assert grid.get(2, 2) == INF
    assert grid.get(0, 0) == 30


def test_no_occupied_cells_leaves_grid_unchanged() -> None:
    grid = CostGrid.zeros(6, 6, fill=12)
    inflate(grid, OCC, uniform_kernel(5), INF)
    assert np.all(grid.cells == 12)


def test_equal_values_warn_by_default(caplog: pytest.LogCaptureFixture) -> None:
    grid = CostGrid.zeros(5, 5)
    grid.set(2, 2, OCC)
    with caplog.at_level(logging.WARNING, logger="costcrop.inflation"):
        inflate(grid, OCC, uniform_kernel(3), OCC)
    assert "no effect" in caplog.text
    assert int(np.count_nonzero(grid.cells == OCC)) == 1


def test_equal_values_raise_in_strict_mode() -> None:
    grid = CostGrid.zeros(5, 5)
    with pytest.raises(InvalidValue):
        inflate(grid, OCC, uniform_kernel(3), OCC, strict=True)


def test_value_range_and_kernel_type_are_checked() -> None:
    grid = CostGrid.zeros(5, 5)
    with pytest.raises(ValueError):
        inflate(grid, 300, uniform_kernel(3), INF)
    with pytest.raises(ValueError):
        inflate(grid, OCC, uniform_kernel(3), -1)
    with pytest.raises(InvalidKernel):
        inflate(grid, OCC, np.ones((3, 3)), INF)


def test_build_mask_thresholds_on_equality() -> None:
    grid = CostGrid.from_array([[250, 251], [249, 250]])
    np.testing.assert_array_equal(build_mask(grid, 250), [[True, False], [False, True]])
