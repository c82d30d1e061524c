"""Pipeline execution engine."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..domain.state import GridState
from ..errors import DeckError
from .registry import StepRegistry

log = logging.getLogger(__name__)


def _step_type(step: Any, idx: int) -> str:
    if not isinstance(step, Mapping):
        raise DeckError(f"steps[{idx}] must be a mapping.")
    if "type" not in step:
        raise DeckError(f"Missing required key 'type' in steps[{idx}].")
    return str(step["type"]).lower()


def run(steps: Iterable[Mapping[str, Any]], state: GridState, registry: StepRegistry) -> GridState:
    """Run deck steps in order against ``state``.

    Any non-DeckError raised by a runner is wrapped so callers only need to
    handle DeckError.
    """
    for idx, raw_step in enumerate(steps):
        stype = _step_type(raw_step, idx)
        runner = registry.resolve(stype)
        if runner is None:
            supported = ", ".join(registry.supported_types())
            raise DeckError(f"steps[{idx}].type '{stype}' is not supported. Use one of: {supported}.")

        log.debug(f"Running step {idx} ('{stype}')")
        try:
            runner(state, dict(raw_step), idx)
        except DeckError:
            raise
        except Exception as exc:
            raise DeckError(f"Step {idx} ('{stype}') failed: {exc}") from exc

    return state
