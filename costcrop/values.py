"""Scalar value helpers.

Cost grids store unsigned 8-bit values, so every cost that enters the core is
checked against the byte range here.
"""

from __future__ import annotations

import numbers

BYTE_MIN = 0
BYTE_MAX = 255


def ensure_byte(name: str, value: object) -> int:
    """Validate an integral cost value within [0, 255] and return it as int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}.")
    ival = int(value)
    if ival < BYTE_MIN or ival > BYTE_MAX:
        raise ValueError(f"{name} must be within [{BYTE_MIN}, {BYTE_MAX}], got {ival}.")
    return ival
