"""Shared error types for costcrop core and orchestration layers."""

from __future__ import annotations


class GridError(ValueError):
    """Base class for grid/region/kernel validation failures."""


class InvalidRegion(GridError):
    """Raised when a region is out of bounds or inverted."""


class InvalidKernel(GridError):
    """Raised when a kernel has a bad size, weight count or weight values."""


class InvalidValue(GridError):
    """Raised (in strict mode) when occupied and inflated values coincide."""


class ShapeMismatch(GridError):
    """Raised when a sub-grid does not match the region it is merged into."""


class DeckError(ValueError):
    """Raised when a deck is invalid or execution fails."""
