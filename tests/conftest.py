"""Shared fixtures for costcrop tests."""

from __future__ import annotations

import numpy as np
import pytest

from costcrop.grid import CostGrid


@pytest.fixture
def pattern_grid() -> CostGrid:
    """40x30 grid with value (row * width + col) mod 256."""
    width, height = 40, 30
    values = (np.arange(width * height) % 256).astype(np.uint8)
    return CostGrid.from_buffer(width, height, values)
