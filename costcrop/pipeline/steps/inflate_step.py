"""Inflate step runner: extract, inflate and merge each configured region."""

from __future__ import annotations

import logging
from typing import Any

from ...config.deck_models import KernelConfig
from ...config.parser import parse_inflate_step
from ...domain.state import GridState
from ...errors import DeckError, GridError
from ...inflation import inflate
from ...kernel import Kernel, build_kernel
from ...merge import merge_region
from ...metrics import region_summary
from ...region import extract_region
from .common import parse_step

log = logging.getLogger(__name__)


def kernel_from_config(cfg: KernelConfig) -> Kernel:
    """Build the inflation kernel described by a KernelConfig."""
    return build_kernel(cfg.shape, cfg.size, sigma=cfg.sigma, normalize=cfg.normalize)


def run_inflate_step(state: GridState, step: dict[str, Any], idx: int) -> None:
    """Inflate occupied cells inside each region, in deck order."""
    context = f"steps[{idx}] (inflate)"
    cfg = parse_step(parse_inflate_step, step, context)

    try:
        kernel = kernel_from_config(cfg.kernel)
    except GridError as exc:
        raise DeckError(f"{context}.kernel: {exc}") from exc

    for r_idx, region in enumerate(cfg.regions):
        # later regions see the merged result of earlier overlapping ones
        if any(region.overlaps(prev) for prev in cfg.regions[:r_idx]):
            log.debug(f"{context}.regions[{r_idx}] overlaps an earlier region")
        try:
            sub = extract_region(state.grid, region)
            inflate(sub, cfg.occupied_value, kernel, cfg.inflated_value, strict=cfg.strict)
            merge_region(state.grid, region, sub)
        except GridError as exc:
            raise DeckError(f"{context}.regions[{r_idx}]: {exc}") from exc

        summary = region_summary(state.grid, region, cfg.occupied_value, cfg.inflated_value)
        state.regions.append(region)
        state.history.append(
            {
                "step": idx,
                "region": region.as_dict(),
                "occupied": summary["occupied"],
                "inflated": summary["inflated"],
            }
        )
