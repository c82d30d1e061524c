"""Pipeline service built on top of pipeline primitives."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..config import parse_grid_config, parse_step_configs, parse_steps
from ..domain.state import GridState, build_initial_state
from ..errors import DeckError
from ..pipeline.engine import run as run_pipeline
from ..pipeline.registry import StepRegistry, StepRunner, create_step_registry
from ..pipeline.steps import build_default_step_handlers


@dataclass(slots=True)
class PipelineService:
    """Execute deck steps through the configured registry."""

    registry: StepRegistry

    def run_steps(self, *, state: GridState, steps: list[dict[str, Any]]) -> GridState:
        """Run prepared step payload list against an initialized state."""
        return run_pipeline(steps, state, self.registry)

    def run_payload(
        self,
        deck: dict[str, Any],
        *,
        deck_path: str | Path | None = None,
        out_override: str | Path | None = None,
    ) -> GridState:
        """Run the pipeline from an in-memory deck payload."""
        path = Path("__in_memory_deck__.yaml") if deck_path is None else Path(deck_path)
        if not path.is_absolute():
            path = (Path.cwd() / path).resolve()

        if not isinstance(deck, dict):
            raise DeckError("deck must be a mapping.")

        try:
            steps = parse_steps(deck)
            parse_step_configs(deck)
            grid_config = parse_grid_config(deck)
        except (TypeError, ValueError) as exc:
            raise DeckError(str(exc)) from exc

        try:
            state = build_initial_state(grid_config=grid_config, deck_path=path, steps=steps, out_override=out_override)
        except DeckError:
            raise
        except (TypeError, ValueError, OSError) as exc:
            raise DeckError(f"Failed to build initial grid: {exc}") from exc
        return self.run_steps(state=state, steps=steps)


def build_pipeline_service(handlers: dict[str, StepRunner]) -> PipelineService:
    """Create PipelineService from explicit step handlers."""
    return PipelineService(registry=create_step_registry(handlers))


def build_default_pipeline_service() -> PipelineService:
    """Create PipelineService using default built-in step handlers."""
    return build_pipeline_service(build_default_step_handlers())
