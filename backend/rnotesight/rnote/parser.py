"""Rnote document parser — inflated JSON text → RnoteDocument.

Strict at the document level, lenient per element: a broken envelope raises
MalformedDocument, a broken stroke just becomes an inert component.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from rnotesight.models.document import (
    ELEMENT_KINDS,
    SHAPE_VARIANTS,
    Component,
    Element,
    RnoteDocument,
    RnoteEnvelope,
    ShapeStroke,
)
from rnotesight.rnote.errors import MalformedDocument, UnsupportedElement

logger = logging.getLogger(__name__)


def parse_document(text: str) -> RnoteDocument:
    """Parse the JSON payload of an ``.rnote`` file into a document."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocument(f"payload is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise MalformedDocument(f"root must be an object, got {type(raw).__name__}")

    try:
        envelope = RnoteEnvelope.model_validate(raw)
    except ValidationError as e:
        raise MalformedDocument(
            f"missing data.engine_snapshot.stroke_components ({e.error_count()} validation errors)"
        ) from e

    raw_components = envelope.data.engine_snapshot.stroke_components or []
    components = tuple(_parse_component(i, c) for i, c in enumerate(raw_components))

    logger.debug(
        "Parsed document v%s: %d components, %d drawable",
        envelope.version or "?",
        len(components),
        sum(1 for c in components if c.element is not None),
    )
    return RnoteDocument(version=envelope.version, components=components)


def _parse_component(index: int, raw: Any) -> Component:
    if not isinstance(raw, dict):
        return Component()
    value = raw.get("value")
    if not isinstance(value, dict):
        return Component()
    try:
        return Component(element=resolve_element(value))
    except UnsupportedElement as e:
        logger.debug("Component %d skipped: %s", index, e)
        return Component()


def resolve_element(value: dict[str, Any]) -> Element:
    """Resolve a component value into exactly one element kind.

    Kinds are probed brushstroke → shapestroke → textstroke and only the first
    populated one is used. Raises UnsupportedElement when none is usable.
    """
    for key, model in ELEMENT_KINDS:
        raw = value.get(key)
        if raw is None:
            continue
        if model is ShapeStroke:
            return _resolve_shape_stroke(raw)
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise UnsupportedElement(f"{key}: {e.error_count()} invalid fields") from e
    raise UnsupportedElement(f"no known element kind in {sorted(value)}")


def _resolve_shape_stroke(raw: Any) -> ShapeStroke:
    if not isinstance(raw, dict):
        raise UnsupportedElement("shapestroke is not an object")

    shape = raw.get("shape")
    # Shape strokes nest the primitive one level deeper: {"shape": {"shape": {...}}}.
    if isinstance(shape, dict) and isinstance(shape.get("shape"), dict):
        shape = shape["shape"]
    if not isinstance(shape, dict):
        raise UnsupportedElement("shapestroke has no shape")

    for key, model in SHAPE_VARIANTS:
        variant = shape.get(key)
        if variant is None:
            continue
        try:
            primitive = model.model_validate(variant)
        except ValidationError as e:
            # rect without cuboid, ellipse without radii: try the next variant
            if key in ("rect", "ellipse"):
                continue
            raise UnsupportedElement(f"shape {key} is incomplete") from e
        try:
            return ShapeStroke.model_validate({"shape": primitive, "style": raw.get("style")})
        except ValidationError as e:
            raise UnsupportedElement(f"shapestroke style: {e.error_count()} invalid fields") from e

    raise UnsupportedElement(f"no known shape in {sorted(shape)}")
