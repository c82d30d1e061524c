"""Kernel-weighted obstacle inflation over a sub-grid.

Inflation marks every cell within the kernel's support of an occupied cell
with an "inflated" cost, without ever downgrading the occupied cells
themselves. The neighbourhood reduction is written out explicitly so the
boundary rule is fixed: taps that fall outside the grid contribute zero
(no wraparound, no reflection).
"""

from __future__ import annotations

import logging

import numpy as np

from .errors import InvalidKernel, InvalidValue
from .grid import CostGrid
from .kernel import Kernel
from .merge import merge_region
from .region import Region, extract_region
from .values import ensure_byte

log = logging.getLogger(__name__)


def build_mask(grid: CostGrid, occupied_value: int) -> np.ndarray:
    """Return the (height, width) boolean mask of cells equal to occupied_value."""
    value = ensure_byte("occupied_value", occupied_value)
    return grid.as_array() == value


def kernel_response(mask: np.ndarray, kernel: Kernel) -> np.ndarray:
    """Weighted neighbourhood sum of ``mask`` under ``kernel``.

    ``response[r, c] = sum(weight[half + dr, half + dc] * mask[r + dr, c + dc])``
    over ``dr, dc in [-half, half]``. Out-of-bounds taps are treated as 0.
    """
    if mask.ndim != 2:
        raise ValueError(f"mask must be 2D, got shape {mask.shape}.")
    if not isinstance(kernel, Kernel):
        raise InvalidKernel(f"kernel must be a Kernel, got {type(kernel).__name__}.")

    rows, cols = mask.shape
    half = kernel.half
    weights = kernel.as_array()
    src = mask.astype(float)
    response = np.zeros((rows, cols), dtype=float)

    for kr in range(kernel.size):
        dr = kr - half
        # destination rows whose source row r + dr stays inside the grid
        r0, r1 = max(0, -dr), min(rows, rows - dr)
        if r0 >= r1:
            continue
        for kc in range(kernel.size):
            w = weights[kr, kc]
            if w == 0.0:
                continue
            dc = kc - half
            c0, c1 = max(0, -dc), min(cols, cols - dc)
            if c0 >= c1:
                continue
            response[r0:r1, c0:c1] += w * src[r0 + dr : r1 + dr, c0 + dc : c1 + dc]
    return response


def dilate_mask(mask: np.ndarray, kernel: Kernel) -> np.ndarray:
    """Cells with any positive kernel contribution from the mask."""
    return kernel_response(mask, kernel) > 0.0


def check_values(occupied_value: int, inflated_value: int, *, strict: bool = False) -> tuple[int, int]:
    """Validate the occupied/inflated cost pair.

    Equal values make inflation a no-op, which is almost always a
    misconfiguration: it is logged as a warning, or raised as InvalidValue
    when ``strict`` is set.
    """
    occ = ensure_byte("occupied_value", occupied_value)
    inf = ensure_byte("inflated_value", inflated_value)
    if occ == inf:
        msg = f"occupied_value and inflated_value are both {occ}; inflation has no effect."
        if strict:
            raise InvalidValue(msg)
        log.warning(msg)
    return occ, inf


def inflate(
    subgrid: CostGrid,
    occupied_value: int,
    kernel: Kernel,
    inflated_value: int,
    *,
    strict: bool = False,
) -> CostGrid:
    """Inflate occupied cells of ``subgrid`` in place and return it.

    Cells covered by the dilated mask take ``inflated_value`` unless they were
    occupied to begin with, in which case they keep ``occupied_value``.
    """
    if not isinstance(kernel, Kernel):
        raise InvalidKernel(f"kernel must be a Kernel, got {type(kernel).__name__}.")
    occ, inf = check_values(occupied_value, inflated_value, strict=strict)

    mask = build_mask(subgrid, occ)
    if not mask.any():
        log.debug(f"No cells equal {occ} in {subgrid.width}x{subgrid.height} sub-grid; nothing to inflate")
        return subgrid

    covered = dilate_mask(mask, kernel) & ~mask
    subgrid.as_array()[covered] = inf
    log.debug(
        f"Inflated {subgrid.width}x{subgrid.height} sub-grid: "
        f"occupied={int(mask.sum())}, inflated={int(covered.sum())}, kernel={kernel.size}"
    )
    return subgrid


def inflate_region(
    grid: CostGrid,
    region: Region,
    occupied_value: int,
    kernel: Kernel,
    inflated_value: int,
    *,
    strict: bool = False,
) -> CostGrid:
    """Extract ``region``, inflate it and merge it back into ``grid``."""
    sub = extract_region(grid, region)
    inflate(sub, occupied_value, kernel, inflated_value, strict=strict)
    return merge_region(grid, region, sub)
