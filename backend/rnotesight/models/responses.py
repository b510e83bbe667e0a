"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from rnotesight.models.scene import Scene


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    builders_registered: int = 0
    element_kinds: list[str] = Field(default_factory=list)


class RenderResponse(BaseModel):
    scene: Scene
    primitive_count: int = 0
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
    message: str


class DocumentListResponse(BaseModel):
    documents: list[str] = Field(default_factory=list)
