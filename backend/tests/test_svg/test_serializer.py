"""Tests for scene → SVG serialization."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from rnotesight.engine.assembler import render
from rnotesight.models.scene import Primitive, PrimitiveStyle, Scene, Viewport
from rnotesight.svg.serializer import primitive_to_svg, serialize_scene
from tests.conftest import compress

_NS = "{http://www.w3.org/2000/svg}"


def _scene(*prims: Primitive) -> Scene:
    return Scene(primitives=list(prims), viewport=Viewport(min_x=-50, min_y=-50, width=200, height=150))


def test_svg_root_attributes():
    svg = serialize_scene(_scene())
    root = ET.fromstring(svg.split("\n", 1)[1])
    assert root.tag == f"{_NS}svg"
    assert root.attrib["viewBox"] == "-50 -50 200 150"
    assert root.attrib["width"] == "100%"
    assert "background-color: white" in root.attrib["style"]


def test_arrowhead_marker_defined():
    svg = serialize_scene(_scene())
    root = ET.fromstring(svg.split("\n", 1)[1])
    marker = root.find(f"{_NS}defs/{_NS}marker")
    assert marker is not None
    assert marker.attrib["id"] == "arrowhead"
    assert marker.attrib["orient"] == "auto"
    assert marker.find(f"{_NS}polygon").attrib["points"] == "0 0, 10 3.5, 0 7"


def test_one_element_per_primitive_in_order(mixed_blob):
    scene = render(mixed_blob)
    root = ET.fromstring(serialize_scene(scene).split("\n", 1)[1])
    tags = [child.tag.replace(_NS, "") for child in root if child.tag != f"{_NS}defs"]
    assert tags == ["path", "ellipse", "line", "text"]


def test_line_with_marker():
    prim = Primitive(
        kind="line",
        geometry={"x1": 0.0, "y1": 0.0, "x2": 10.5, "y2": 3.0},
        style=PrimitiveStyle(stroke="rgba(0, 0, 0, 1)", stroke_width=2.0, marker_end="arrowhead"),
    )
    tag = primitive_to_svg(prim)
    assert tag.startswith("<line ")
    assert 'x2="10.5"' in tag
    assert 'y2="3"' in tag
    assert 'marker-end="url(#arrowhead)"' in tag
    assert 'stroke-width="2"' in tag


def test_transform_matrix():
    prim = Primitive(
        kind="rect",
        geometry={"x": -5.0, "y": -5.0, "width": 10.0, "height": 10.0},
        style=PrimitiveStyle(transform=(1.0, 0.0, 0.0, 1.0, 100.0, 25.5)),
    )
    assert 'transform="matrix(1,0,0,1,100,25.5)"' in primitive_to_svg(prim)


def test_polyline_points():
    prim = Primitive(kind="polyline", geometry={"points": [[0.0, 0.0], [1.5, 2.0]]})
    assert 'points="0,0 1.5,2"' in primitive_to_svg(prim)


def test_text_is_escaped():
    prim = Primitive(
        kind="text",
        geometry={"text": "<a> & b", "x": 0.0, "y": 0.0},
        style=PrimitiveStyle(fill="black", font_size=32.0, font_family="sans-serif"),
    )
    tag = primitive_to_svg(prim)
    assert re.search(r"<text [^>]*>&lt;a&gt; &amp; b</text>", tag)
    assert 'font-size="32"' in tag
    assert 'font-family="sans-serif"' in tag


def test_empty_document_svg(empty_doc):
    svg = serialize_scene(render(compress(empty_doc)))
    assert 'viewBox="0 0 800 600"' in svg
