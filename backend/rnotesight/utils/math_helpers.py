"""Math helpers — number formatting, channel scaling. No engine imports."""

from __future__ import annotations

import math

# Integers beyond this are printed in float notation.
_MAX_EXACT_INT = 1e15


def format_number(value: float) -> str:
    """Shortest text for a coordinate: 3.0 → "3", 0.25 → "0.25"."""
    v = float(value)
    if math.isfinite(v) and v.is_integer() and abs(v) < _MAX_EXACT_INT:
        return str(int(v))
    return repr(v)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 → 3, not 2)."""
    return int(math.floor(value + 0.5))


def scale_channel(value: float) -> int:
    """Map a [0, 1] colour channel to [0, 255]."""
    return round_half_up(value * 255)
