"""Pipeline primitives for step-based execution."""

from .engine import run
from .registry import StepRegistry, StepRunner, create_step_registry

__all__ = ["StepRegistry", "StepRunner", "create_step_registry", "run"]
