"""Summary metrics over cost grids and regions."""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from .grid import CostGrid
from .region import Region, extract_region


def value_counts(grid: CostGrid) -> dict[int, int]:
    """Return {value: cell count} for every value present in the grid."""
    counts = np.bincount(grid.cells, minlength=256)
    return {int(v): int(counts[v]) for v in np.flatnonzero(counts)}


def grid_summary(grid: CostGrid) -> dict[str, Any]:
    """Shape, min/max and per-value counts of a grid."""
    return {
        "width": grid.width,
        "height": grid.height,
        "min": int(grid.cells.min()),
        "max": int(grid.cells.max()),
        "counts": {str(k): v for k, v in value_counts(grid).items()},
    }


def region_summary(
    grid: CostGrid,
    region: Region,
    occupied_value: int | None = None,
    inflated_value: int | None = None,
) -> dict[str, Any]:
    """Summary of one region, with occupied/inflated cell counts when values are given."""
    sub = extract_region(grid, region)
    report = {"region": region.as_dict(), **grid_summary(sub)}
    if occupied_value is not None:
        report["occupied"] = int(np.count_nonzero(sub.cells == occupied_value))
    if inflated_value is not None:
        report["inflated"] = int(np.count_nonzero(sub.cells == inflated_value))
    return report


def regions_summary(grid: CostGrid, regions: Iterable[Region]) -> list[dict[str, Any]]:
    return [region_summary(grid, region) for region in regions]
