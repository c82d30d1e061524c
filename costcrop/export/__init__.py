"""Export manager and format-specific writers."""

from .manager import EXPORT_FORMATS, export_results
from .metrics_writer import save_metrics_csv, save_metrics_json
from .npy_writer import load_grid_npy, save_grid_npy
from .png_writer import flip_rows, normalize_minmax, render_image, save_grid_png

__all__ = [
    "EXPORT_FORMATS",
    "export_results",
    "flip_rows",
    "load_grid_npy",
    "normalize_minmax",
    "render_image",
    "save_grid_npy",
    "save_grid_png",
    "save_metrics_csv",
    "save_metrics_json",
]
