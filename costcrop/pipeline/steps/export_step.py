"""Export step runner."""

from __future__ import annotations

from typing import Any

from ...config.parser import parse_export_step
from ...domain.state import GridState
from ...errors import DeckError
from ...export.manager import export_results
from .common import parse_step


def run_export_step(state: GridState, step: dict[str, Any], idx: int) -> None:
    """Write the grid in the requested formats."""
    context = f"steps[{idx}] (export)"
    cfg = parse_step(parse_export_step, step, context)
    outdir = state.resolve_outdir(outdir_step=cfg.outdir)

    try:
        written = export_results(
            grid=state.grid,
            outdir=outdir,
            formats=cfg.formats,
            plot_cfg=cfg.plot,
            regions=state.regions,
        )
    except ValueError as exc:
        raise DeckError(f"{context} failed: {exc}") from exc
    state.exports.extend(written)
