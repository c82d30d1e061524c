"""Export manager orchestrating format-specific writers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..grid import CostGrid
from ..region import Region
from .npy_writer import save_grid_npy
from .png_writer import save_grid_png

EXPORT_FORMATS = ("npy", "png")


def _ensure_outdir(outdir: str | Path) -> Path:
    path = Path(outdir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def export_results(
    grid: CostGrid,
    outdir: str | Path,
    formats: Iterable[str],
    plot_cfg: dict | None = None,
    regions: Iterable[Region] = (),
) -> list[Path]:
    """Export the current grid in the requested formats."""
    requested = {str(fmt).lower() for fmt in formats}
    unknown = requested - set(EXPORT_FORMATS)
    if unknown:
        raise ValueError(f"Unsupported export format(s): {sorted(unknown)}")

    out = _ensure_outdir(outdir)
    written: list[Path] = []

    if "npy" in requested:
        written.append(save_grid_npy(grid, out, filename="grid.npy"))

    if "png" in requested:
        written.append(save_grid_png(grid, out, filename="grid.png", plot_cfg=plot_cfg, regions=list(regions)))

    return written
