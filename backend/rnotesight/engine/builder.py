"""Geometry builder — document elements → drawing primitives + bounds updates.

Every builder appends to the render pass's BoundingBox as a side effect and
returns the primitives for its node. Bounds rules are deliberately coarse:
rects and ellipses only count with a transform (translation ± half-extents),
Béziers count their endpoints, polylines count their untransformed points,
text counts an estimated box from its translation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from rnotesight.engine.bounds import BoundingBox
from rnotesight.engine.config import RenderConfig
from rnotesight.engine.outline import outline_to_path_data, variable_width_outline
from rnotesight.engine.registry import builder, get_registry
from rnotesight.models.document import (
    AffineTransform,
    ArrowShape,
    BrushStroke,
    CubicBezierShape,
    Element,
    EllipseShape,
    LineShape,
    PolygonShape,
    PolylineShape,
    QuadBezierShape,
    RectShape,
    ShapeStroke,
    Style,
    TextStroke,
)
from rnotesight.models.scene import Primitive, PrimitiveStyle
from rnotesight.rnote.errors import UnsupportedElement
from rnotesight.utils.math_helpers import format_number

logger = logging.getLogger(__name__)

ARROWHEAD_MARKER = "arrowhead"


@dataclass
class BuildContext:
    """Per-render state handed to every builder."""

    bounds: BoundingBox
    config: RenderConfig
    # Stroke style of the enclosing shape stroke
    style: Style | None = None


def build_element(element: Element, ctx: BuildContext) -> list[Primitive]:
    """Build the primitives for one element. Unsupported elements yield []."""
    spec = get_registry().get(type(element))
    if spec is None:
        logger.debug("No builder for %s", type(element).__name__)
        return []
    try:
        return spec.fn(element, ctx)
    except UnsupportedElement as e:
        logger.debug("Skipped %s: %s", spec.kind, e)
        return []


def _stroked(style: Style | None, **extra) -> PrimitiveStyle:
    style = style or Style()
    return PrimitiveStyle(
        fill="none",
        stroke=style.color.to_css(),
        stroke_width=style.width,
        stroke_linecap="round",
        stroke_linejoin="round",
        **extra,
    )


def _matrix(transform: AffineTransform | None):
    return transform.svg_matrix() if transform is not None else None


# ---------------------------------------------------------------------------
# Element kinds
# ---------------------------------------------------------------------------


@builder(BrushStroke, kind="brushstroke", description="Pressure-sensitive freehand stroke")
def build_brush(stroke: BrushStroke, ctx: BuildContext) -> list[Primitive]:
    samples = stroke.path.points()
    points = [s.pos for s in samples]
    # Bounds follow the centerline, not the widened outline.
    ctx.bounds.include_all(points)

    base_width = stroke.style.width * ctx.config.brush_width_scale
    outline = variable_width_outline(points, [s.pressure for s in samples], base_width)
    if outline is None:
        return []

    return [
        Primitive(
            kind="path",
            geometry={"d": outline_to_path_data(outline)},
            style=PrimitiveStyle(fill=stroke.style.color.to_css(), stroke="none"),
        )
    ]


@builder(ShapeStroke, kind="shapestroke", description="Geometric shape drawn unfilled")
def build_shape_stroke(stroke: ShapeStroke, ctx: BuildContext) -> list[Primitive]:
    spec = get_registry().get(type(stroke.shape))
    if spec is None:
        raise UnsupportedElement(f"no builder for shape {type(stroke.shape).__name__}")
    return spec.fn(stroke.shape, replace(ctx, style=stroke.style))


@builder(TextStroke, kind="textstroke", description="Text run placed by its transform")
def build_text(stroke: TextStroke, ctx: BuildContext) -> list[Primitive]:
    size = stroke.text_style.font_size
    if stroke.transform is not None:
        tx, ty = stroke.transform.translation
        ctx.bounds.include(tx, ty)
        ctx.bounds.include(
            tx + len(stroke.text) * size * ctx.config.text_char_width_factor,
            ty + size,
        )

    return [
        Primitive(
            kind="text",
            geometry={"text": stroke.text, "x": 0.0, "y": 0.0},
            style=PrimitiveStyle(
                fill=stroke.text_style.color.to_css(),
                font_size=size,
                font_family=ctx.config.font_family,
                transform=_matrix(stroke.transform),
            ),
        )
    ]


# ---------------------------------------------------------------------------
# Shape variants
# ---------------------------------------------------------------------------


@builder(LineShape, kind="line")
def build_line(shape: LineShape, ctx: BuildContext) -> list[Primitive]:
    ctx.bounds.include_all((shape.start, shape.end))
    return [
        Primitive(
            kind="line",
            geometry=_segment(shape.start, shape.end),
            style=_stroked(ctx.style),
        )
    ]


@builder(ArrowShape, kind="arrow")
def build_arrow(shape: ArrowShape, ctx: BuildContext) -> list[Primitive]:
    ctx.bounds.include_all((shape.start, shape.tip))
    return [
        Primitive(
            kind="line",
            geometry=_segment(shape.start, shape.tip),
            style=_stroked(ctx.style, marker_end=ARROWHEAD_MARKER),
        )
    ]


def _segment(start: tuple[float, float], end: tuple[float, float]) -> dict[str, float]:
    return {"x1": start[0], "y1": start[1], "x2": end[0], "y2": end[1]}


@builder(RectShape, kind="rect")
def build_rect(shape: RectShape, ctx: BuildContext) -> list[Primitive]:
    hx, hy = shape.cuboid.half_extents
    if shape.transform is not None:
        _include_translated_extents(ctx.bounds, shape.transform, hx, hy)
    return [
        Primitive(
            kind="rect",
            geometry={"x": -hx, "y": -hy, "width": hx * 2, "height": hy * 2},
            style=_stroked(ctx.style, transform=_matrix(shape.transform)),
        )
    ]


@builder(EllipseShape, kind="ellipse")
def build_ellipse(shape: EllipseShape, ctx: BuildContext) -> list[Primitive]:
    rx, ry = shape.radii
    if shape.transform is not None:
        _include_translated_extents(ctx.bounds, shape.transform, rx, ry)
    return [
        Primitive(
            kind="ellipse",
            geometry={"cx": 0.0, "cy": 0.0, "rx": rx, "ry": ry},
            style=_stroked(ctx.style, transform=_matrix(shape.transform)),
        )
    ]


def _include_translated_extents(
    bounds: BoundingBox, transform: AffineTransform, hx: float, hy: float
) -> None:
    # Rotation and scale are ignored on purpose: translation ± extents only.
    tx, ty = transform.translation
    bounds.include(tx - hx, ty - hy)
    bounds.include(tx + hx, ty + hy)


@builder(CubicBezierShape, kind="cubbez")
def build_cubic_bezier(shape: CubicBezierShape, ctx: BuildContext) -> list[Primitive]:
    ctx.bounds.include_all((shape.start, shape.end))
    n = format_number
    d = (
        f"M {n(shape.start[0])} {n(shape.start[1])} "
        f"C {n(shape.cp1[0])} {n(shape.cp1[1])}, {n(shape.cp2[0])} {n(shape.cp2[1])}, "
        f"{n(shape.end[0])} {n(shape.end[1])}"
    )
    return [Primitive(kind="path", geometry={"d": d}, style=_stroked(ctx.style))]


@builder(QuadBezierShape, kind="quadbez")
def build_quad_bezier(shape: QuadBezierShape, ctx: BuildContext) -> list[Primitive]:
    ctx.bounds.include_all((shape.start, shape.end))
    n = format_number
    d = (
        f"M {n(shape.start[0])} {n(shape.start[1])} "
        f"Q {n(shape.cp[0])} {n(shape.cp[1])} {n(shape.end[0])} {n(shape.end[1])}"
    )
    return [Primitive(kind="path", geometry={"d": d}, style=_stroked(ctx.style))]


@builder(PolylineShape, kind="poly_line")
def build_polyline(shape: PolylineShape, ctx: BuildContext) -> list[Primitive]:
    return _poly("polyline", shape, ctx)


@builder(PolygonShape, kind="polygon")
def build_polygon(shape: PolygonShape, ctx: BuildContext) -> list[Primitive]:
    return _poly("polygon", shape, ctx)


def _poly(kind: str, shape: PolylineShape | PolygonShape, ctx: BuildContext) -> list[Primitive]:
    # Bounds use the raw points even when a transform moves the drawn shape.
    ctx.bounds.include_all(shape.points)
    return [
        Primitive(
            kind=kind,
            geometry={"points": [[x, y] for x, y in shape.points]},
            style=_stroked(ctx.style, transform=_matrix(shape.transform)),
        )
    ]
