"""Pipeline runtime state and initialization helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..config.deck_models import GridConfig
from ..errors import DeckError
from ..export.npy_writer import load_grid_npy
from ..grid import CostGrid
from ..region import Region


def resolve_outdir(
    deck_path: Path,
    outdir_step: str | None,
    out_override: str | Path | None,
) -> Path:
    """Resolve output directory from override/step/default values."""
    if out_override is not None:
        path = Path(out_override)
        if not path.is_absolute():
            path = path.resolve()
        return path

    path = Path("outputs/run") if outdir_step is None else Path(outdir_step)
    if not path.is_absolute():
        path = (deck_path.parent / path).resolve()
    return path


def default_export_outdir_step(steps: list[dict[str, Any]]) -> str | None:
    """Find default outdir from first export step, if present."""
    for step in steps:
        if str(step.get("type", "")).lower() == "export":
            if "outdir" in step:
                return str(step["outdir"])
            return None
    return None


@dataclass
class GridState:
    """In-memory grid state shared across step runners."""

    deck_path: Path
    grid: CostGrid
    out_override: str | Path | None = None
    default_export_outdir_step: str | None = None
    regions: list[Region] = field(default_factory=list)
    metrics: dict[str, Any] | None = None
    history: list[dict[str, Any]] = field(default_factory=list)
    exports: list[Path] = field(default_factory=list)

    def resolve_outdir(self, outdir_step: str | None = None) -> Path:
        """Resolve outdir using state deck path/defaults/override."""
        target = outdir_step if outdir_step is not None else self.default_export_outdir_step
        return resolve_outdir(self.deck_path, target, self.out_override)


def load_initial_grid(config: GridConfig, deck_path: Path) -> CostGrid:
    """Build the starting grid from a fill value or a .npy source file."""
    if config.source is not None:
        path = Path(config.source)
        if not path.is_absolute():
            path = (deck_path.parent / path).resolve()
        if not path.exists():
            raise DeckError(f"Grid source not found: {path}")
        return load_grid_npy(path)

    if config.width is None or config.height is None:
        raise DeckError("deck.grid needs width and height when no source is given.")
    return CostGrid.zeros(config.width, config.height, fill=config.fill)


def build_initial_state(
    *,
    grid_config: GridConfig,
    deck_path: Path,
    steps: list[dict[str, Any]],
    out_override: str | Path | None,
) -> GridState:
    """Construct pipeline state from validated grid config."""
    return GridState(
        deck_path=deck_path,
        grid=load_initial_grid(grid_config, deck_path),
        out_override=out_override,
        default_export_outdir_step=default_export_outdir_step(steps),
    )
