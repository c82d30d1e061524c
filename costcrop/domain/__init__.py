"""Domain-layer types."""

from ..grid import CostGrid
from ..region import Region
from .state import GridState, build_initial_state, load_initial_grid, resolve_outdir

__all__ = ["CostGrid", "GridState", "Region", "build_initial_state", "load_initial_grid", "resolve_outdir"]
