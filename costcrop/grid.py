"""Dense row-major cost grid."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .values import ensure_byte


@dataclass(frozen=True, eq=False)
class CostGrid:
    """Fixed-size grid of uint8 cost values stored as a flat row-major buffer.

    Coordinates follow image convention:
    - col (x): index along a row, 0 <= col < width
    - row (y): row index, 0 <= row < height

    ``cells[row * width + col]`` is the value at ``(col, row)``. The buffer is
    owned by the grid; builders always copy their input.
    """

    width: int
    height: int
    cells: np.ndarray

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}.")
        if self.height <= 0:
            raise ValueError(f"height must be > 0, got {self.height}.")
        if self.cells.dtype != np.uint8 or self.cells.ndim != 1:
            raise ValueError("cells must be a 1D uint8 array.")
        if self.cells.shape[0] != self.width * self.height:
            raise ValueError(
                f"cells must have length {self.width * self.height}, got {self.cells.shape[0]}."
            )

    @classmethod
    def zeros(cls, width: int, height: int, fill: int = 0) -> "CostGrid":
        """Construct a grid with every cell set to ``fill``."""
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}.")
        value = ensure_byte("fill", fill)
        return cls(width=width, height=height, cells=np.full(width * height, value, dtype=np.uint8))

    @classmethod
    def from_buffer(cls, width: int, height: int, buffer) -> "CostGrid":
        """Construct a grid from a flat row-major buffer (copied)."""
        flat = _as_byte_array(buffer).ravel()
        width = int(width)
        height = int(height)
        if flat.shape[0] != width * height:
            raise ValueError(f"buffer must have length {width * height}, got {flat.shape[0]}.")
        return cls(width=width, height=height, cells=flat.copy())

    @classmethod
    def from_array(cls, arr) -> "CostGrid":
        """Construct a grid from a 2D ``(height, width)`` array (copied)."""
        data = _as_byte_array(arr)
        if data.ndim != 2:
            raise ValueError(f"array must be 2D, got shape {data.shape}.")
        height, width = data.shape
        return cls(width=int(width), height=int(height), cells=np.ascontiguousarray(data).ravel().copy())

    @property
    def shape(self) -> tuple[int, int]:
        """Return grid shape as (height, width)."""
        return (self.height, self.width)

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def index(self, col: int, row: int) -> int:
        """Convert (col, row) to the flat row-major index."""
        if not self.in_bounds(col, row):
            raise IndexError(f"cell ({col}, {row}) is outside grid {self.width}x{self.height}.")
        return row * self.width + col

    def get(self, col: int, row: int) -> int:
        return int(self.cells[self.index(col, row)])

    def set(self, col: int, row: int, value: int) -> None:
        self.cells[self.index(col, row)] = ensure_byte("value", value)

    def as_array(self) -> np.ndarray:
        """Return a (height, width) view sharing the grid buffer."""
        return self.cells.reshape(self.height, self.width)

    def copy(self) -> "CostGrid":
        return CostGrid(width=self.width, height=self.height, cells=self.cells.copy())

    def equals(self, other: "CostGrid") -> bool:
        """Cell-wise equality including dimensions."""
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))


def _as_byte_array(value) -> np.ndarray:
    arr = np.asarray(value)
    if arr.dtype == np.uint8:
        return arr
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise ValueError(f"grid values must be numeric, got dtype {arr.dtype}.")
    if arr.size and (np.any(arr < 0) or np.any(arr > 255)):
        raise ValueError("grid values must be within [0, 255].")
    if np.issubdtype(arr.dtype, np.floating) and arr.size and np.any(arr != np.round(arr)):
        raise ValueError("grid values must be integral.")
    return arr.astype(np.uint8)
