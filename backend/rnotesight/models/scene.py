"""Rendered scene model — what the vector surface consumes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

PrimitiveKind = Literal["path", "line", "rect", "ellipse", "polygon", "polyline", "text"]


class PrimitiveStyle(BaseModel):
    fill: str = "none"
    stroke: str = "none"
    stroke_width: float | None = None
    stroke_linecap: str | None = None
    stroke_linejoin: str | None = None
    marker_end: str | None = None
    # SVG matrix(a, b, c, d, e, f)
    transform: tuple[float, float, float, float, float, float] | None = None
    font_size: float | None = None
    font_family: str | None = None


class Primitive(BaseModel):
    """One drawing instruction.

    ``geometry`` keys depend on ``kind``:
    path → d; line → x1, y1, x2, y2; rect → x, y, width, height;
    ellipse → cx, cy, rx, ry; polygon/polyline → points; text → text.
    """

    kind: PrimitiveKind
    geometry: dict[str, Any] = Field(default_factory=dict)
    style: PrimitiveStyle = Field(default_factory=PrimitiveStyle)


class Viewport(BaseModel):
    min_x: float
    min_y: float
    width: float
    height: float

    def as_viewbox(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.width, self.height)


class Scene(BaseModel):
    version: str = ""
    primitives: list[Primitive] = Field(default_factory=list)
    viewport: Viewport
    background: str = "white"
