"""Common parsing helpers for pipeline step modules."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Mapping, TypeVar

from ...errors import DeckError

ConfigT = TypeVar("ConfigT")


def parse_step(
    parser: Callable[[Mapping[str, Any], str], ConfigT],
    step: Mapping[str, Any],
    context: str,
) -> ConfigT:
    """Run a typed step parser and raise DeckError on failure."""
    try:
        return parser(step, context)
    except (TypeError, ValueError) as exc:
        raise DeckError(str(exc)) from exc
