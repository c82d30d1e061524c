"""Typed models for deck-level configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..region import Region

DEFAULT_OCCUPIED_VALUE = 250
DEFAULT_INFLATED_VALUE = 100


@dataclass(frozen=True)
class GridConfig:
    """Initial grid: either a constant fill or a .npy source."""

    width: int | None = None
    height: int | None = None
    fill: int = 0
    source: str | None = None


@dataclass(frozen=True)
class KernelConfig:
    """Inflation kernel parameters."""

    shape: Literal["uniform", "ellipse", "gaussian"] = "gaussian"
    size: int = 51
    sigma: float = 10.0
    normalize: bool = True


@dataclass(frozen=True)
class DiskStepConfig:
    """Typed disk pattern step config."""

    type: Literal["disk"] = "disk"
    center_x: int = 0
    center_y: int = 0
    radius: int = 0
    value: int = DEFAULT_OCCUPIED_VALUE


@dataclass(frozen=True)
class RectangleStepConfig:
    """Typed rectangle pattern step config."""

    type: Literal["rectangle"] = "rectangle"
    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0
    value: int = DEFAULT_OCCUPIED_VALUE


@dataclass(frozen=True)
class InflateStepConfig:
    """Typed inflate step config."""

    type: Literal["inflate"] = "inflate"
    regions: list[Region] = field(default_factory=list)
    occupied_value: int = DEFAULT_OCCUPIED_VALUE
    inflated_value: int = DEFAULT_INFLATED_VALUE
    kernel: KernelConfig = field(default_factory=KernelConfig)
    strict: bool = False


@dataclass(frozen=True)
class AnalyzeStepConfig:
    """Typed analyze step config."""

    type: Literal["analyze"] = "analyze"
    outdir: str | None = None
    save_json: bool = True
    save_csv: bool = True


@dataclass(frozen=True)
class ExportStepConfig:
    """Typed export step config."""

    type: Literal["export"] = "export"
    outdir: str | None = None
    formats: list[str] = field(default_factory=lambda: ["npy"])
    plot: dict = field(default_factory=dict)
