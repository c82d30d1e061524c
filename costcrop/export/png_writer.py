"""PNG renderer for cost grids."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from ..grid import CostGrid
from ..region import Region


def _ensure_outdir(outdir: str | Path) -> Path:
    path = Path(outdir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def normalize_minmax(arr: np.ndarray, lo: int = 0, hi: int = 255) -> np.ndarray:
    """Linearly rescale ``arr`` so its min maps to ``lo`` and its max to ``hi``.

    A constant array maps to ``lo``. Display only: raw cost values lose
    their meaning after this.
    """
    data = np.asarray(arr, dtype=float)
    if data.size == 0:
        return np.zeros(data.shape, dtype=np.uint8)
    smin = float(data.min())
    smax = float(data.max())
    span = smax - smin
    scale = (float(hi) - float(lo)) / span if span > np.finfo(float).eps else 0.0
    out = (data - smin) * scale + float(lo)
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


def flip_rows(arr: np.ndarray) -> np.ndarray:
    """Flip an image vertically so row 0 ends up at the bottom."""
    return np.ascontiguousarray(np.asarray(arr)[::-1, :])


def render_image(grid: CostGrid, plot_cfg: dict | None = None) -> np.ndarray:
    """Return the (height, width) uint8 image the PNG writer would draw."""
    cfg = dict(plot_cfg or {})
    image = grid.as_array()
    if bool(cfg.get("normalize", True)):
        image = normalize_minmax(image)
    else:
        image = image.copy()
    if bool(cfg.get("flip", False)):
        image = flip_rows(image)
    return image


def save_grid_png(
    grid: CostGrid,
    outdir: str | Path,
    filename: str = "grid.png",
    plot_cfg: dict | None = None,
    regions: Iterable[Region] = (),
) -> Path:
    """Save the grid as a grayscale PNG."""
    cfg = dict(plot_cfg or {})
    flip = bool(cfg.get("flip", False))
    image = render_image(grid, cfg)
    path = _ensure_outdir(outdir) / filename

    aspect = grid.height / grid.width
    fig, ax = plt.subplots(figsize=(6.0, min(max(6.0 * aspect, 2.0), 12.0)), dpi=120)
    ax.imshow(image, cmap="gray", vmin=0, vmax=255, origin="upper", interpolation="nearest")
    if bool(cfg.get("show_regions", False)):
        for region in regions:
            top = grid.height - 1 - region.max_y if flip else region.min_y
            ax.add_patch(
                Rectangle(
                    (region.min_x - 0.5, top - 0.5),
                    region.width,
                    region.height,
                    fill=False,
                    edgecolor="tab:red",
                    linewidth=1.5,
                )
            )
    ax.set_xlabel("x [cell]")
    ax.set_ylabel("y [cell]")
    ax.set_title(str(cfg.get("title", "Costmap")))
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
