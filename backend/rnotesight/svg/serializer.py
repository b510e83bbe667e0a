"""Write SVG markup from a rendered scene."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

from rnotesight.engine.builder import ARROWHEAD_MARKER
from rnotesight.models.scene import Primitive, PrimitiveStyle, Scene
from rnotesight.utils.math_helpers import format_number

_ARROWHEAD_DEF = (
    f'<marker id="{ARROWHEAD_MARKER}" markerWidth="10" markerHeight="7" refX="9" refY="3.5" orient="auto">'
    '<polygon points="0 0, 10 3.5, 0 7" fill="context-stroke" /></marker>'
)


def serialize_scene(scene: Scene, width: str = "100%") -> str:
    """Generate SVG markup for a scene, one element per primitive in order."""
    viewbox = " ".join(format_number(v) for v in scene.viewport.as_viewbox())
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{viewbox}" width="{width}" xmlns="http://www.w3.org/2000/svg"'
        f' style="background-color: {scene.background}">',
        f"  <defs>{_ARROWHEAD_DEF}</defs>",
    ]

    for prim in scene.primitives:
        lines.append("  " + primitive_to_svg(prim))

    lines.append("</svg>")
    return "\n".join(lines)


def primitive_to_svg(prim: Primitive) -> str:
    attrs = _geometry_attrs(prim) + _style_attrs(prim.style)
    attr_str = " ".join(f"{k}={quoteattr(v)}" for k, v in attrs)
    if prim.kind == "text":
        return f"<text {attr_str}>{escape(str(prim.geometry.get('text', '')))}</text>"
    return f"<{prim.kind} {attr_str} />"


def _geometry_attrs(prim: Primitive) -> list[tuple[str, str]]:
    geom = prim.geometry
    if prim.kind == "path":
        return [("d", geom.get("d", ""))]
    if prim.kind in ("polygon", "polyline"):
        pts = " ".join(f"{format_number(x)},{format_number(y)}" for x, y in geom.get("points", []))
        return [("points", pts)]
    if prim.kind == "text":
        keys: tuple[str, ...] = ("x", "y")
    else:
        keys = tuple(geom)
    return [(k, _attr_value(geom[k])) for k in keys if k in geom]


def _style_attrs(style: PrimitiveStyle) -> list[tuple[str, str]]:
    attrs: list[tuple[str, str]] = [("fill", style.fill), ("stroke", style.stroke)]
    if style.stroke_width is not None:
        attrs.append(("stroke-width", format_number(style.stroke_width)))
    if style.stroke_linecap:
        attrs.append(("stroke-linecap", style.stroke_linecap))
    if style.stroke_linejoin:
        attrs.append(("stroke-linejoin", style.stroke_linejoin))
    if style.marker_end:
        attrs.append(("marker-end", f"url(#{style.marker_end})"))
    if style.font_size is not None:
        attrs.append(("font-size", format_number(style.font_size)))
    if style.font_family:
        attrs.append(("font-family", style.font_family))
    if style.transform is not None:
        attrs.append(("transform", f"matrix({','.join(format_number(v) for v in style.transform)})"))
    return attrs


def _attr_value(value: Any) -> str:
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)
