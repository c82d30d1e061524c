"""Test-pattern step runners."""

from __future__ import annotations

from typing import Any

from ...config.parser import parse_disk_step, parse_rectangle_step
from ...domain.state import GridState
from ...patterns import fill_disk, fill_rectangle
from .common import parse_step


def run_disk_step(state: GridState, step: dict[str, Any], idx: int) -> None:
    """Draw a filled disk into the grid."""
    cfg = parse_step(parse_disk_step, step, f"steps[{idx}] (disk)")
    fill_disk(state.grid, cfg.center_x, cfg.center_y, cfg.radius, cfg.value)


def run_rectangle_step(state: GridState, step: dict[str, Any], idx: int) -> None:
    """Draw a filled rectangle into the grid."""
    cfg = parse_step(parse_rectangle_step, step, f"steps[{idx}] (rectangle)")
    fill_rectangle(state.grid, cfg.min_x, cfg.min_y, cfg.max_x, cfg.max_y, cfg.value)
