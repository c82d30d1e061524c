"""Analyze step runner."""

from __future__ import annotations

from typing import Any

from ...config.parser import parse_analyze_step
from ...domain.state import GridState
from ...export.metrics_writer import save_metrics_csv, save_metrics_json
from ...metrics import grid_summary, regions_summary
from .common import parse_step


def run_analyze_step(state: GridState, step: dict[str, Any], idx: int) -> None:
    """Summarize the grid and every processed region, then save the report."""
    cfg = parse_step(parse_analyze_step, step, f"steps[{idx}] (analyze)")
    outdir = state.resolve_outdir(outdir_step=cfg.outdir)

    report: dict[str, Any] = {
        "grid": grid_summary(state.grid),
        "regions": regions_summary(state.grid, state.regions),
    }
    if state.history:
        report["inflation"] = list(state.history)

    if cfg.save_json:
        state.exports.append(save_metrics_json(report, outdir, filename="metrics.json"))
    if cfg.save_csv:
        state.exports.append(save_metrics_csv(report, outdir, filename="metrics.csv"))

    state.metrics = report
