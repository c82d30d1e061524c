"""Typed config models and parsers."""

from .deck_models import (
    AnalyzeStepConfig,
    DiskStepConfig,
    ExportStepConfig,
    GridConfig,
    InflateStepConfig,
    KernelConfig,
    RectangleStepConfig,
)
from .parser import (
    STEP_TYPES,
    parse_analyze_step,
    parse_disk_step,
    parse_export_step,
    parse_grid_config,
    parse_inflate_step,
    parse_kernel_config,
    parse_rectangle_step,
    parse_region,
    parse_step_configs,
    parse_steps,
)
from .validators import (
    as_mapping,
    ensure_choice,
    ensure_nonnegative,
    opt_mapping,
    required,
    to_byte,
    to_float,
    to_int,
)

__all__ = [
    "AnalyzeStepConfig",
    "DiskStepConfig",
    "ExportStepConfig",
    "GridConfig",
    "InflateStepConfig",
    "KernelConfig",
    "RectangleStepConfig",
    "STEP_TYPES",
    "as_mapping",
    "ensure_choice",
    "ensure_nonnegative",
    "opt_mapping",
    "parse_analyze_step",
    "parse_disk_step",
    "parse_export_step",
    "parse_grid_config",
    "parse_inflate_step",
    "parse_kernel_config",
    "parse_rectangle_step",
    "parse_region",
    "parse_step_configs",
    "parse_steps",
    "required",
    "to_byte",
    "to_float",
    "to_int",
]
