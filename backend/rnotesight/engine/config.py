"""Render configuration — scene framing and stroke rendering constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rnotesight.config import Settings


@dataclass(frozen=True)
class RenderConfig:
    """Controls how a document is framed and drawn."""

    # Added to every side of the bounding box
    viewport_margin: float = 50.0

    # Viewport used when nothing contributed bounds
    default_viewport_width: float = 800.0
    default_viewport_height: float = 600.0

    background: str = "white"

    # Brush outlines are drawn at twice the style width for visual weight
    brush_width_scale: float = 2.0

    # Text bounds heuristic: width ≈ chars × size × factor, height ≈ size
    text_char_width_factor: float = 0.6
    font_family: str = "sans-serif"

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RenderConfig":
        return cls(
            viewport_margin=settings.viewport_margin,
            default_viewport_width=settings.default_viewport_width,
            default_viewport_height=settings.default_viewport_height,
            background=settings.background,
        )
