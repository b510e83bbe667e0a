"""Rasterize a rendered scene to PNG with CairoSVG."""

from __future__ import annotations

import logging

from rnotesight.models.scene import Scene
from rnotesight.svg.serializer import serialize_scene

logger = logging.getLogger(__name__)

DEFAULT_PNG_WIDTH = 1024


def rasterize_scene(scene: Scene, width: int | None = None) -> bytes:
    """Render a scene to PNG bytes. Height follows the viewport aspect ratio."""
    import cairosvg

    if width is None:
        width = DEFAULT_PNG_WIDTH

    vp = scene.viewport
    height = max(1, round(width * vp.height / vp.width)) if vp.width > 0 else width
    svg = serialize_scene(scene, width=str(width))

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
            background_color=scene.background,
        )
    except Exception as e:
        logger.warning("Failed to render scene to PNG: %s", e)
        raise
