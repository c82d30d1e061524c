"""Write a processed sub-grid back into its parent grid."""

from __future__ import annotations

import logging

from .errors import ShapeMismatch
from .grid import CostGrid
from .region import Region, validate_region

log = logging.getLogger(__name__)


def merge_region(grid: CostGrid, region: Region, subgrid: CostGrid) -> CostGrid:
    """Overwrite the footprint of ``region`` in ``grid`` with ``subgrid``.

    Cells outside the region are untouched and no blending or rescaling is
    done. Both checks run before any write, so a failing call leaves ``grid``
    unchanged.
    """
    validate_region(grid, region)
    if subgrid.width != region.width or subgrid.height != region.height:
        raise ShapeMismatch(
            f"sub-grid is {subgrid.width}x{subgrid.height} but region {region.as_dict()} "
            f"is {region.width}x{region.height}."
        )

    rows, cols = region.slices()
    grid.as_array()[rows, cols] = subgrid.as_array()
    log.debug(f"Merged {subgrid.width}x{subgrid.height} sub-grid into region {region.as_dict()}")
    return grid
