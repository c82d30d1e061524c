"""Inclusive index regions and bounds-safe sub-grid extraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .errors import InvalidRegion
from .grid import CostGrid

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle of grid cells with inclusive bounds."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_rect(cls, x: int, y: int, w: int, h: int) -> "Region":
        """Build the inclusive region covered by a top-left/size rectangle."""
        return cls(min_x=int(x), min_y=int(y), max_x=int(x) + int(w) - 1, max_y=int(y) + int(h) - 1)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def shape(self) -> tuple[int, int]:
        """Return region shape as (height, width)."""
        return (self.height, self.width)

    def translate(self, dx: int, dy: int) -> "Region":
        return Region(self.min_x + dx, self.min_y + dy, self.max_x + dx, self.max_y + dy)

    def contains(self, col: int, row: int) -> bool:
        return self.min_x <= col <= self.max_x and self.min_y <= row <= self.max_y

    def overlaps(self, other: "Region") -> bool:
        """True when both regions share at least one cell."""
        return not (
            other.min_x > self.max_x
            or other.max_x < self.min_x
            or other.min_y > self.max_y
            or other.max_y < self.min_y
        )

    def as_dict(self) -> dict[str, int]:
        return {"min_x": self.min_x, "min_y": self.min_y, "max_x": self.max_x, "max_y": self.max_y}

    def slices(self) -> tuple[slice, slice]:
        """Return (row, col) slices selecting this region from a (height, width) array."""
        return slice(self.min_y, self.max_y + 1), slice(self.min_x, self.max_x + 1)


def validate_region(grid: CostGrid, region: Region) -> None:
    """Raise InvalidRegion unless region lies inside grid and is not inverted."""
    problems: list[str] = []
    if region.min_x < 0:
        problems.append("min_x < 0")
    if region.min_y < 0:
        problems.append("min_y < 0")
    if region.max_x >= grid.width:
        problems.append(f"max_x >= width ({grid.width})")
    if region.max_y >= grid.height:
        problems.append(f"max_y >= height ({grid.height})")
    if region.min_x > region.max_x:
        problems.append("min_x > max_x")
    if region.min_y > region.max_y:
        problems.append("min_y > max_y")
    if problems:
        raise InvalidRegion(
            f"Invalid region {region.as_dict()} for grid {grid.width}x{grid.height}: "
            + ", ".join(problems)
            + "."
        )


def extract_region(grid: CostGrid, region: Region) -> CostGrid:
    """Copy the cells of ``region`` out of ``grid`` into a new sub-grid.

    Sub-grid cell ``(c, r)`` equals
    ``grid.cells[(region.min_y + r) * grid.width + (region.min_x + c)]``.
    The result never shares memory with ``grid``.
    """
    validate_region(grid, region)
    rows, cols = region.slices()
    block = np.array(grid.as_array()[rows, cols], dtype=np.uint8, order="C", copy=True)
    log.debug(f"Extracted region {region.as_dict()} -> {region.width}x{region.height} sub-grid")
    return CostGrid(width=region.width, height=region.height, cells=block.ravel())
