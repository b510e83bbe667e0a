"""Rnote document model.

Only the fields the renderer consumes are modelled; unknown fields are ignored.
Defaults for optional fields are applied here, while validating, so the
geometry builder never has to guess.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rnotesight.utils.colors import rgba_css

DEFAULT_PRESSURE = 0.5
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_ALPHA = 1.0
DEFAULT_FONT_SIZE = 32.0

Point = tuple[float, float]


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RnoteColor(_Node):
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = DEFAULT_ALPHA

    @field_validator("a", mode="before")
    @classmethod
    def _alpha_default(cls, v: Any) -> Any:
        return DEFAULT_ALPHA if v is None else v

    def to_css(self) -> str:
        return rgba_css(self.r, self.g, self.b, self.a)


BLACK = RnoteColor()


class AffineTransform(_Node):
    """3x3 matrix packed column by column; the homogeneous row is ignored."""

    affine: tuple[float, float, float, float, float, float, float, float, float]

    @property
    def translation(self) -> Point:
        return (self.affine[6], self.affine[7])

    def svg_matrix(self) -> tuple[float, float, float, float, float, float]:
        a = self.affine
        return (a[0], a[1], a[3], a[4], a[6], a[7])

    def apply(self, point: Point) -> Point:
        a = self.affine
        x, y = point
        return (a[0] * x + a[3] * y + a[6], a[1] * x + a[4] * y + a[7])


class StrokeStyle(_Node):
    stroke_width: float | None = None
    stroke_color: RnoteColor | None = None


class Style(_Node):
    """Resolved stroke style: the first populated of smooth, rough, technic."""

    kind: str | None = None
    width: float = DEFAULT_STROKE_WIDTH
    color: RnoteColor = BLACK

    @model_validator(mode="before")
    @classmethod
    def _pick_sub_style(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict) or "width" in data or "color" in data:
            return data
        for kind in ("smooth", "rough", "technic"):
            raw = data.get(kind)
            if raw is None:
                continue
            sub = StrokeStyle.model_validate(raw)
            resolved: dict[str, Any] = {"kind": kind}
            # A zero width counts as absent.
            if sub.stroke_width:
                resolved["width"] = sub.stroke_width
            if sub.stroke_color is not None:
                resolved["color"] = sub.stroke_color
            return resolved
        return {}


class TextStyle(_Node):
    font_size: float = DEFAULT_FONT_SIZE
    color: RnoteColor = BLACK

    @field_validator("font_size", mode="before")
    @classmethod
    def _font_size_default(cls, v: Any) -> Any:
        return v or DEFAULT_FONT_SIZE

    @field_validator("color", mode="before")
    @classmethod
    def _color_default(cls, v: Any) -> Any:
        return BLACK if v is None else v


# ---------------------------------------------------------------------------
# Brush strokes
# ---------------------------------------------------------------------------


class PathPoint(_Node):
    pos: Point
    pressure: float = DEFAULT_PRESSURE

    @field_validator("pressure", mode="before")
    @classmethod
    def _pressure_default(cls, v: Any) -> Any:
        return DEFAULT_PRESSURE if v is None else v


class LineTo(_Node):
    end: PathPoint


class Segment(_Node):
    lineto: LineTo


class BrushPath(_Node):
    start: PathPoint
    segments: list[Segment] = Field(default_factory=list)

    def points(self) -> list[PathPoint]:
        return [self.start] + [seg.lineto.end for seg in self.segments]


class BrushStroke(_Node):
    path: BrushPath
    style: Style = Field(default_factory=Style)

    @field_validator("style", mode="before")
    @classmethod
    def _style_default(cls, v: Any) -> Any:
        return {} if v is None else v


# ---------------------------------------------------------------------------
# Shape strokes
# ---------------------------------------------------------------------------


class Cuboid(_Node):
    half_extents: Point


class RectShape(_Node):
    cuboid: Cuboid
    transform: AffineTransform | None = None


class EllipseShape(_Node):
    radii: Point
    transform: AffineTransform | None = None


class LineShape(_Node):
    start: Point
    end: Point


class ArrowShape(_Node):
    start: Point
    tip: Point


class CubicBezierShape(_Node):
    start: Point
    cp1: Point
    cp2: Point
    end: Point


class QuadBezierShape(_Node):
    start: Point
    cp: Point
    end: Point


class PolylineShape(_Node):
    points: list[Point]
    transform: AffineTransform | None = None


class PolygonShape(_Node):
    points: list[Point]
    transform: AffineTransform | None = None


Shape = Union[
    RectShape,
    EllipseShape,
    LineShape,
    ArrowShape,
    CubicBezierShape,
    QuadBezierShape,
    PolylineShape,
    PolygonShape,
]

# Field name in the file -> model, in the order variants are probed.
SHAPE_VARIANTS: tuple[tuple[str, type[BaseModel]], ...] = (
    ("line", LineShape),
    ("arrow", ArrowShape),
    ("rect", RectShape),
    ("ellipse", EllipseShape),
    ("cubbez", CubicBezierShape),
    ("quadbez", QuadBezierShape),
    ("poly_line", PolylineShape),
    ("polygon", PolygonShape),
)


class ShapeStroke(_Node):
    shape: Shape
    style: Style = Field(default_factory=Style)

    @field_validator("style", mode="before")
    @classmethod
    def _style_default(cls, v: Any) -> Any:
        return {} if v is None else v


# ---------------------------------------------------------------------------
# Text strokes
# ---------------------------------------------------------------------------


class TextStroke(_Node):
    text: str = ""
    transform: AffineTransform | None = None
    text_style: TextStyle = Field(default_factory=TextStyle)

    @field_validator("text", mode="before")
    @classmethod
    def _text_default(cls, v: Any) -> Any:
        return v or ""

    @field_validator("text_style", mode="before")
    @classmethod
    def _text_style_default(cls, v: Any) -> Any:
        return {} if v is None else v


Element = Union[BrushStroke, ShapeStroke, TextStroke]

# Field name in the file -> model, in the order element kinds are probed.
ELEMENT_KINDS: tuple[tuple[str, type[BaseModel]], ...] = (
    ("brushstroke", BrushStroke),
    ("shapestroke", ShapeStroke),
    ("textstroke", TextStroke),
)


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class Component(_Node):
    """One slot of the stroke sequence. ``element`` is None for inert slots."""

    element: Element | None = None


class RnoteDocument(_Node):
    version: str = ""
    components: tuple[Component, ...] = ()

    @property
    def elements(self) -> list[Element]:
        return [c.element for c in self.components if c.element is not None]


class EngineSnapshot(_Node):
    stroke_components: list[Any] | None


class SnapshotData(_Node):
    engine_snapshot: EngineSnapshot


class RnoteEnvelope(_Node):
    """Mandatory top-level shape of an inflated ``.rnote`` file."""

    version: str = ""
    data: SnapshotData

    @field_validator("version", mode="before")
    @classmethod
    def _version_text(cls, v: Any) -> Any:
        return "" if v is None else str(v)
