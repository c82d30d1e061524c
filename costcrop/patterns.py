"""Synthetic test patterns drawn into a cost grid."""

from __future__ import annotations

import numpy as np

from .grid import CostGrid
from .values import ensure_byte


def fill_disk(grid: CostGrid, center_x: int, center_y: int, radius: int, value: int) -> int:
    """Set every cell with ``dx*dx + dy*dy <= radius*radius`` to ``value``.

    The disk is clipped to the grid. Returns the number of cells written.
    """
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}.")
    val = ensure_byte("value", value)
    rows = np.arange(grid.height)[:, None] - int(center_y)
    cols = np.arange(grid.width)[None, :] - int(center_x)
    inside = rows * rows + cols * cols <= int(radius) * int(radius)
    grid.as_array()[inside] = val
    return int(inside.sum())


def fill_rectangle(grid: CostGrid, min_x: int, min_y: int, max_x: int, max_y: int, value: int) -> int:
    """Fill the inclusive rectangle clipped to the grid. Returns cells written."""
    val = ensure_byte("value", value)
    x0, x1 = max(0, int(min_x)), min(grid.width - 1, int(max_x))
    y0, y1 = max(0, int(min_y)), min(grid.height - 1, int(max_y))
    if x0 > x1 or y0 > y1:
        return 0
    grid.as_array()[y0 : y1 + 1, x0 : x1 + 1] = val
    return (x1 - x0 + 1) * (y1 - y0 + 1)
