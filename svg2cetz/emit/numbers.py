"""Number formatting for emitted coordinates."""

from __future__ import annotations

import numpy as np


def format_number(value: float) -> str:
    """Format ``value`` as the shortest positional decimal that round-trips.

    Integral values drop the fractional part (``1.0`` -> ``1``) and negative
    zero is written as ``0``.
    """
    value = float(value)
    if value == 0.0:
        return "0"
    return np.format_float_positional(value, unique=True, trim="-")


def format_point(point: tuple[float, float]) -> str:
    return f"({format_number(point[0])}, {format_number(point[1])})"
