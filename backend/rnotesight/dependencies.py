"""FastAPI dependency injection."""

from __future__ import annotations

from pathlib import Path

from rnotesight.config import Settings, settings
from rnotesight.engine.config import RenderConfig
from rnotesight.rnote.source import DocumentSource


def get_settings() -> Settings:
    return settings


def get_render_config() -> RenderConfig:
    return RenderConfig.from_settings(settings)


def get_document_source() -> DocumentSource:
    return DocumentSource(Path(settings.notes_dir))
