"""NumPy grid writer."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from ..grid import CostGrid


def save_grid_npy(grid: CostGrid, outdir: str | Path, filename: str = "grid.npy") -> Path:
    """Save the grid as a (height, width) uint8 .npy array."""
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / filename
    np.save(path, np.asarray(grid.as_array(), dtype=np.uint8))
    return path


def load_grid_npy(path: str | Path) -> CostGrid:
    """Load a 2D array saved with :func:`save_grid_npy` (or any byte-valued 2D array)."""
    arr = np.load(Path(path), allow_pickle=False)
    return CostGrid.from_array(arr)
