"""Step registry mapping deck step types to runner callables."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..domain.state import GridState

StepRunner = Callable[[GridState, dict[str, Any], int], None]


class StepRegistry:
    """Case-insensitive lookup of step runners by step type."""

    def __init__(self, handlers: dict[str, StepRunner] | None = None) -> None:
        self._handlers: dict[str, StepRunner] = {}
        for step_type, runner in (handlers or {}).items():
            self.register(step_type, runner)

    def register(self, step_type: str, runner: StepRunner) -> None:
        if not callable(runner):
            raise TypeError(f"Runner for '{step_type}' must be callable.")
        key = str(step_type).lower()
        if not key:
            raise ValueError("step type must be a non-empty string.")
        self._handlers[key] = runner

    def resolve(self, step_type: str) -> StepRunner | None:
        return self._handlers.get(str(step_type).lower())

    def __contains__(self, step_type: object) -> bool:
        return str(step_type).lower() in self._handlers

    def supported_types(self) -> tuple[str, ...]:
        return tuple(self._handlers)


def create_step_registry(handlers: dict[str, StepRunner]) -> StepRegistry:
    """Build a registry from a step-type -> handler mapping."""
    return StepRegistry(handlers=handlers)
