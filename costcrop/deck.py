"""YAML deck loading and execution."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .config.validators import as_mapping
from .domain.state import GridState
from .errors import DeckError
from .services import build_default_pipeline_service


def load_deck(deck_path: str | Path) -> dict[str, Any]:
    """Load YAML deck from file."""
    path = Path(deck_path)
    if not path.exists():
        raise DeckError(f"Deck file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise DeckError(f"Failed to parse YAML deck: {path}") from exc

    if payload is None:
        raise DeckError(f"Deck is empty: {path}")
    try:
        return as_mapping(payload, "deck")
    except ValueError as exc:
        raise DeckError(str(exc)) from exc


def run_deck_payload(
    deck: dict[str, Any],
    *,
    deck_path: str | Path | None = None,
    out_override: str | Path | None = None,
) -> GridState:
    """Run the pipeline from an in-memory deck payload."""
    service = build_default_pipeline_service()
    return service.run_payload(deck, deck_path=deck_path, out_override=out_override)


def run_deck(deck_path: str | Path, out_override: str | Path | None = None) -> GridState:
    """Run all steps from a YAML deck."""
    deck_path = Path(deck_path).resolve()
    deck = load_deck(deck_path)
    return run_deck_payload(deck, deck_path=deck_path, out_override=out_override)
