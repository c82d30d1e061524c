"""Costmap region extraction, kernel-weighted obstacle inflation and merge-back."""

from .errors import DeckError, GridError, InvalidKernel, InvalidRegion, InvalidValue, ShapeMismatch
from .grid import CostGrid
from .inflation import build_mask, dilate_mask, inflate, inflate_region, kernel_response
from .kernel import Kernel, build_kernel, ellipse_kernel, gaussian_kernel, kernel_from_weights, uniform_kernel
from .merge import merge_region
from .region import Region, extract_region, validate_region

__version__ = "0.1.0"

__all__ = [
    "CostGrid",
    "DeckError",
    "GridError",
    "InvalidKernel",
    "InvalidRegion",
    "InvalidValue",
    "Kernel",
    "Region",
    "ShapeMismatch",
    "build_kernel",
    "build_mask",
    "dilate_mask",
    "ellipse_kernel",
    "extract_region",
    "gaussian_kernel",
    "inflate",
    "inflate_region",
    "kernel_from_weights",
    "kernel_response",
    "merge_region",
    "uniform_kernel",
    "validate_region",
]
