"""Default step runner registry mapping."""

from __future__ import annotations

from ..registry import StepRunner
from .analyze_step import run_analyze_step
from .export_step import run_export_step
from .inflate_step import kernel_from_config, run_inflate_step
from .pattern_step import run_disk_step, run_rectangle_step


def build_default_step_handlers() -> dict[str, StepRunner]:
    """Return default step-type -> runner mapping."""
    return {
        "disk": run_disk_step,
        "rectangle": run_rectangle_step,
        "inflate": run_inflate_step,
        "analyze": run_analyze_step,
        "export": run_export_step,
    }


__all__ = ["build_default_step_handlers", "kernel_from_config"]
