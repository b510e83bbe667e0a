"""Shared test fixtures."""

from __future__ import annotations

import copy
import gzip
import json
from typing import Any

import pytest


def make_rnote(components: list[Any] | None = None, version: str = "0.10.0") -> dict[str, Any]:
    """Minimal .rnote JSON envelope around a list of stroke components."""
    return {
        "version": version,
        "data": {
            "engine_snapshot": {
                "stroke_components": components if components is not None else [],
                "camera": {"zoom": 1.0},
            }
        },
    }


def compress(doc: Any) -> bytes:
    text = doc if isinstance(doc, str) else json.dumps(doc)
    return gzip.compress(text.encode("utf-8"))


def smooth_style(width: float = 2.0, color: dict[str, float] | None = None) -> dict[str, Any]:
    return {
        "smooth": {
            "stroke_width": width,
            "stroke_color": color or {"r": 0.0, "g": 0.0, "b": 0.0, "a": 1.0},
        }
    }


def brush(points: list[tuple[float, float]], pressures: list[float | None] | None = None, style=None):
    pressures = pressures if pressures is not None else [None] * len(points)

    def _pt(i: int) -> dict[str, Any]:
        pt: dict[str, Any] = {"pos": list(points[i])}
        if pressures[i] is not None:
            pt["pressure"] = pressures[i]
        return pt

    return {
        "value": {
            "brushstroke": {
                "path": {
                    "start": _pt(0),
                    "segments": [{"lineto": {"end": _pt(i)}} for i in range(1, len(points))],
                },
                "style": style if style is not None else smooth_style(),
            }
        }
    }


def shape(variant: str, body: dict[str, Any], style=None, nested: bool = True) -> dict[str, Any]:
    inner = {variant: body}
    return {
        "value": {
            "shapestroke": {
                "shape": {"shape": inner} if nested else inner,
                "style": style if style is not None else smooth_style(),
            }
        }
    }


def translate(tx: float, ty: float) -> dict[str, list[float]]:
    return {"affine": [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, tx, ty, 1.0]}


def text(content: str, transform=None, font_size: float | None = 20.0, color=None) -> dict[str, Any]:
    text_style: dict[str, Any] = {}
    if font_size is not None:
        text_style["font_size"] = font_size
    if color is not None:
        text_style["color"] = color
    body: dict[str, Any] = {"text": content, "text_style": text_style}
    if transform is not None:
        body["transform"] = transform
    return {"value": {"textstroke": body}}


# Sample documents

EMPTY_DOC = make_rnote([])

LINE_DOC = make_rnote([shape("line", {"start": [0.0, 0.0], "end": [100.0, 50.0]})])

MIXED_DOC = make_rnote(
    [
        brush([(0.0, 0.0), (10.0, 0.0), (20.0, 5.0)], [0.2, 0.6, 1.0]),
        None,
        {"value": None},
        shape("ellipse", {"radii": [3.0, 4.0], "transform": translate(100.0, 100.0)}),
        shape("arrow", {"start": [10.0, 10.0], "tip": [40.0, 10.0]}),
        text("Hi & bye", transform=translate(5.0, 200.0), font_size=10.0),
    ]
)


@pytest.fixture
def empty_doc() -> dict[str, Any]:
    return copy.deepcopy(EMPTY_DOC)


@pytest.fixture
def mixed_doc() -> dict[str, Any]:
    return copy.deepcopy(MIXED_DOC)


@pytest.fixture
def mixed_blob() -> bytes:
    return compress(MIXED_DOC)
