"""Numeric helpers shared by every scoring stage."""

from __future__ import annotations

import math


def clamp(value: float, lo: float = 0.0, hi: float = 10.0) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


def round_half_up(value: float, digits: int) -> float:
    """Round to *digits* decimals with halves rounded up.

    ``round()`` uses banker's rounding (``round(0.25, 1) == 0.2``), which
    would make 6.25 and 6.35 round in different directions.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round1(value: float) -> float:
    return round_half_up(value, 1)
