"""Scene assembler — the single render entry point.

bytes → inflate → parse → build each element in document order → frame the
bounding box → Scene. Any fatal failure aborts the whole pass; there is no
partial scene.
"""

from __future__ import annotations

import logging
import time

from rnotesight.engine.bounds import BoundingBox
from rnotesight.engine.builder import BuildContext, build_element
from rnotesight.engine.config import RenderConfig
from rnotesight.models.document import RnoteDocument
from rnotesight.models.scene import Primitive, Scene, Viewport
from rnotesight.rnote.decompress import inflate_to_text
from rnotesight.rnote.errors import RenderError
from rnotesight.rnote.parser import parse_document

logger = logging.getLogger(__name__)


def assemble_scene(document: RnoteDocument, config: RenderConfig | None = None) -> Scene:
    """Turn a parsed document into a framed scene."""
    config = config or RenderConfig()
    ctx = BuildContext(bounds=BoundingBox(), config=config)

    primitives: list[Primitive] = []
    for element in document.elements:
        primitives.extend(build_element(element, ctx))

    return Scene(
        version=document.version,
        primitives=primitives,
        viewport=frame_viewport(ctx.bounds, config),
        background=config.background,
    )


def frame_viewport(bounds: BoundingBox, config: RenderConfig) -> Viewport:
    """Bounding box plus margin, or the fixed default when nothing was bounded."""
    if bounds.is_empty:
        return Viewport(
            min_x=0.0,
            min_y=0.0,
            width=config.default_viewport_width,
            height=config.default_viewport_height,
        )
    return bounds.to_viewport(config.viewport_margin)


def render(blob: bytes, config: RenderConfig | None = None) -> Scene:
    """Render compressed ``.rnote`` bytes. Raises RenderError on fatal input.

    Pure function of its input: no state survives between calls, so it serves
    both the first load and every re-render after the file changes.
    """
    start = time.perf_counter()
    text = inflate_to_text(blob)
    document = parse_document(text)
    scene = assemble_scene(document, config)
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Rendered %d components → %d primitives in %.1fms",
        len(document.components),
        len(scene.primitives),
        elapsed,
    )
    return scene


def try_render(blob: bytes, config: RenderConfig | None = None) -> Scene | RenderError:
    """Like render(), but hands the failure back instead of raising it."""
    try:
        return render(blob, config)
    except RenderError as e:
        logger.warning("Render failed: %s", e)
        return e
