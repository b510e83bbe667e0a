"""sRGB colour strings for SVG attributes."""

from __future__ import annotations

from rnotesight.utils.math_helpers import format_number, scale_channel


def rgba_css(r: float, g: float, b: float, a: float = 1.0) -> str:
    """CSS ``rgba()`` with 8-bit channels and the alpha kept as a fraction."""
    return f"rgba({scale_channel(r)}, {scale_channel(g)}, {scale_channel(b)}, {format_number(a)})"
