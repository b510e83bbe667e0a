"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from rnotesight.engine.registry import get_registry
from rnotesight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    registry = get_registry()
    return HealthResponse(
        status="ok",
        version="0.1.0",
        builders_registered=registry.count,
        element_kinds=registry.kinds(),
    )
