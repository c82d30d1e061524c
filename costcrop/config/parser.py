"""Config parsing and translation utilities."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Union, cast

from ..kernel import KERNEL_SHAPES
from ..region import Region
from .deck_models import (
    DEFAULT_INFLATED_VALUE,
    DEFAULT_OCCUPIED_VALUE,
    AnalyzeStepConfig,
    DiskStepConfig,
    ExportStepConfig,
    GridConfig,
    InflateStepConfig,
    KernelConfig,
    RectangleStepConfig,
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

StepConfig = Union[
    DiskStepConfig,
    RectangleStepConfig,
    InflateStepConfig,
    AnalyzeStepConfig,
    ExportStepConfig,
]

STEP_TYPES = ("disk", "rectangle", "inflate", "analyze", "export")


def parse_steps(deck: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Parse and normalize deck steps."""
    raw_steps = required(deck, "steps", "deck")
    if not isinstance(raw_steps, list) or not raw_steps:
        raise ValueError("deck.steps must be a non-empty list.")

    steps: list[dict[str, Any]] = []
    for idx, raw in enumerate(raw_steps):
        steps.append(as_mapping(raw, f"steps[{idx}]"))
    return steps


def parse_grid_config(deck: Mapping[str, Any]) -> GridConfig:
    """Extract strongly typed grid config from deck payload."""
    grid = as_mapping(required(deck, "grid", "deck"), "deck.grid")
    fill = to_byte(grid.get("fill", 0), "fill", "deck.grid")

    if "source" in grid:
        source = str(grid["source"])
        if not source:
            raise ValueError("deck.grid.source must be a non-empty path.")
        return GridConfig(source=source, fill=fill)

    width = to_int(required(grid, "width", "deck.grid"), "width", "deck.grid")
    height = to_int(required(grid, "height", "deck.grid"), "height", "deck.grid")
    ensure_nonnegative("deck.grid.width", width, allow_zero=False)
    ensure_nonnegative("deck.grid.height", height, allow_zero=False)
    return GridConfig(width=width, height=height, fill=fill)


def parse_region(raw: Any, context: str) -> Region:
    """Parse a region given as {min_x, min_y, max_x, max_y} or {x, y, w, h}.

    Only the shape of the mapping is checked here; bounds are checked against
    the grid when the region is used.
    """
    item = as_mapping(raw, context)
    if "min_x" in item or "max_x" in item:
        return Region(
            min_x=to_int(required(item, "min_x", context), "min_x", context),
            min_y=to_int(required(item, "min_y", context), "min_y", context),
            max_x=to_int(required(item, "max_x", context), "max_x", context),
            max_y=to_int(required(item, "max_y", context), "max_y", context),
        )
    w = to_int(required(item, "w", context), "w", context)
    h = to_int(required(item, "h", context), "h", context)
    ensure_nonnegative(f"{context}.w", w, allow_zero=False)
    ensure_nonnegative(f"{context}.h", h, allow_zero=False)
    return Region.from_rect(
        to_int(required(item, "x", context), "x", context),
        to_int(required(item, "y", context), "y", context),
        w,
        h,
    )


def parse_kernel_config(value: Any, context: str) -> KernelConfig:
    """Parse an optional kernel mapping, filling defaults."""
    cfg = opt_mapping(value, context)
    defaults = KernelConfig()
    shape = ensure_choice(f"{context}.shape", str(cfg.get("shape", defaults.shape)).lower(), KERNEL_SHAPES)
    size = to_int(cfg.get("size", defaults.size), "size", context)
    if size < 1 or size % 2 == 0:
        raise ValueError(f"{context}.size must be a positive odd integer, got {size}.")
    sigma = to_float(cfg.get("sigma", defaults.sigma), "sigma", context)
    ensure_nonnegative(f"{context}.sigma", sigma)
    return KernelConfig(
        shape=cast(Literal["uniform", "ellipse", "gaussian"], shape),
        size=size,
        sigma=sigma,
        normalize=bool(cfg.get("normalize", defaults.normalize)),
    )


def parse_disk_step(step: Mapping[str, Any], context: str) -> DiskStepConfig:
    radius = to_int(required(step, "radius", context), "radius", context)
    ensure_nonnegative(f"{context}.radius", radius)
    return DiskStepConfig(
        center_x=to_int(required(step, "center_x", context), "center_x", context),
        center_y=to_int(required(step, "center_y", context), "center_y", context),
        radius=radius,
        value=to_byte(step.get("value", DEFAULT_OCCUPIED_VALUE), "value", context),
    )


def parse_rectangle_step(step: Mapping[str, Any], context: str) -> RectangleStepConfig:
    return RectangleStepConfig(
        min_x=to_int(required(step, "min_x", context), "min_x", context),
        min_y=to_int(required(step, "min_y", context), "min_y", context),
        max_x=to_int(required(step, "max_x", context), "max_x", context),
        max_y=to_int(required(step, "max_y", context), "max_y", context),
        value=to_byte(step.get("value", DEFAULT_OCCUPIED_VALUE), "value", context),
    )


def parse_inflate_step(step: Mapping[str, Any], context: str) -> InflateStepConfig:
    """Parse an inflate step; accepts ``region`` or a non-empty ``regions`` list."""
    if "region" in step and "regions" in step:
        raise ValueError(f"{context}: use either 'region' or 'regions', not both.")
    if "region" in step:
        regions = [parse_region(step["region"], f"{context}.region")]
    else:
        raw_regions = required(step, "regions", context)
        if not isinstance(raw_regions, list) or not raw_regions:
            raise ValueError(f"{context}.regions must be a non-empty list.")
        regions = [parse_region(item, f"{context}.regions[{r_idx}]") for r_idx, item in enumerate(raw_regions)]

    return InflateStepConfig(
        regions=regions,
        occupied_value=to_byte(step.get("occupied_value", DEFAULT_OCCUPIED_VALUE), "occupied_value", context),
        inflated_value=to_byte(step.get("inflated_value", DEFAULT_INFLATED_VALUE), "inflated_value", context),
        kernel=parse_kernel_config(step.get("kernel"), f"{context}.kernel"),
        strict=bool(step.get("strict", False)),
    )


def parse_analyze_step(step: Mapping[str, Any], context: str) -> AnalyzeStepConfig:
    save_cfg = opt_mapping(step.get("save"), f"{context}.save")
    outdir = step.get("outdir")
    return AnalyzeStepConfig(
        outdir=None if outdir is None else str(outdir),
        save_json=bool(save_cfg.get("json", True)),
        save_csv=bool(save_cfg.get("csv", True)),
    )


def parse_export_step(step: Mapping[str, Any], context: str) -> ExportStepConfig:
    formats_raw = step.get("formats", ["npy"])
    if not isinstance(formats_raw, list) or not formats_raw:
        raise ValueError(f"{context}.formats must be a non-empty list.")
    plot_cfg = opt_mapping(step.get("plot"), f"{context}.plot")
    outdir = step.get("outdir")
    return ExportStepConfig(
        outdir=None if outdir is None else str(outdir),
        formats=[str(fmt).lower() for fmt in formats_raw],
        plot=dict(plot_cfg),
    )


_STEP_PARSERS = {
    "disk": parse_disk_step,
    "rectangle": parse_rectangle_step,
    "inflate": parse_inflate_step,
    "analyze": parse_analyze_step,
    "export": parse_export_step,
}


def parse_step_configs(deck: Mapping[str, Any]) -> list[StepConfig]:
    """Parse deck steps into typed step configs."""
    typed: list[StepConfig] = []
    for idx, step in enumerate(parse_steps(deck)):
        stype = str(required(step, "type", f"steps[{idx}]")).lower()
        parser = _STEP_PARSERS.get(stype)
        if parser is None:
            raise ValueError(
                f"steps[{idx}].type '{stype}' is not supported. "
                f"Use one of: {', '.join(STEP_TYPES)}."
            )
        typed.append(parser(step, f"steps[{idx}] ({stype})"))
    return typed
