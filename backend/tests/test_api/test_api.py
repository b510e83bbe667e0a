"""Tests for API endpoints."""

from __future__ import annotations

import sys
import types

import pytest
from fastapi.testclient import TestClient

from rnotesight.config import Settings
from rnotesight.dependencies import get_document_source, get_settings
from rnotesight.main import app
from rnotesight.rnote.source import DocumentSource
from tests.conftest import EMPTY_DOC, MIXED_DOC, compress

client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["builders_registered"] == 11
    assert "brushstroke" in data["element_kinds"]


def test_render_scene():
    response = client.post("/api/render", content=compress(MIXED_DOC))
    assert response.status_code == 200
    data = response.json()
    assert data["primitive_count"] == 4
    assert [p["kind"] for p in data["scene"]["primitives"]] == ["path", "ellipse", "line", "text"]
    assert data["scene"]["background"] == "white"


def test_render_empty_scene():
    response = client.post("/api/render", content=compress(EMPTY_DOC))
    assert response.status_code == 200
    vp = response.json()["scene"]["viewport"]
    assert vp == {"min_x": 0.0, "min_y": 0.0, "width": 800.0, "height": 600.0}


def test_render_svg():
    response = client.post("/api/render/svg", content=compress(MIXED_DOC))
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert "<svg" in response.text
    assert 'id="arrowhead"' in response.text


def test_render_garbage_bytes():
    response = client.post("/api/render", content=b"definitely not gzip")
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "DecompressionError"
    assert data["message"].startswith("Error rendering Rnote file:")


def test_render_malformed_document():
    response = client.post("/api/render/svg", content=compress({"version": "1", "data": {}}))
    assert response.status_code == 422
    assert response.json()["error"] == "MalformedDocument"


def test_render_rejects_oversized_body():
    app.dependency_overrides[get_settings] = lambda: Settings(max_upload_bytes=16)
    try:
        response = client.post("/api/render", content=compress(MIXED_DOC))
    finally:
        app.dependency_overrides.pop(get_settings, None)
    assert response.status_code == 413


def test_render_png(monkeypatch):
    monkeypatch.setitem(sys.modules, "cairosvg", types.SimpleNamespace(svg2png=lambda **kwargs: b"\x89PNG"))
    response = client.post("/api/render/png", content=compress(MIXED_DOC))
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content == b"\x89PNG"


@pytest.fixture
def notes_client(tmp_path):
    (tmp_path / "page.rnote").write_bytes(compress(MIXED_DOC))
    app.dependency_overrides[get_document_source] = lambda: DocumentSource(tmp_path)
    try:
        yield client
    finally:
        app.dependency_overrides.pop(get_document_source, None)


def test_list_documents(notes_client):
    response = notes_client.get("/api/documents")
    assert response.status_code == 200
    assert response.json()["documents"] == ["page.rnote"]


def test_document_svg(notes_client):
    response = notes_client.get("/api/documents/page/svg")
    assert response.status_code == 200
    assert "<ellipse" in response.text


def test_document_not_found(notes_client):
    response = notes_client.get("/api/documents/missing/svg")
    assert response.status_code == 404
    assert response.json()["error"] == "DocumentNotFound"
