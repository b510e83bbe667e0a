"""POST /api/render — compressed .rnote bytes in, scene out."""

from __future__ import annotations

import asyncio
import time
from functools import partial

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from rnotesight.config import Settings
from rnotesight.dependencies import get_render_config, get_settings
from rnotesight.engine.assembler import render
from rnotesight.engine.config import RenderConfig
from rnotesight.models.responses import ErrorResponse, RenderResponse
from rnotesight.svg.rasterizer import rasterize_scene
from rnotesight.svg.serializer import serialize_scene

router = APIRouter(prefix="/render")

_ERRORS = {422: {"model": ErrorResponse}, 413: {"model": ErrorResponse}}


async def _read_body(request: Request, settings: Settings) -> bytes:
    blob = await request.body()
    if len(blob) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Upload exceeds max_upload_bytes")
    return blob


@router.post("", response_model=RenderResponse, responses=_ERRORS)
async def render_scene(
    request: Request,
    settings: Settings = Depends(get_settings),
    config: RenderConfig = Depends(get_render_config),
) -> RenderResponse:
    blob = await _read_body(request, settings)
    start = time.perf_counter()
    loop = asyncio.get_running_loop()
    scene = await loop.run_in_executor(None, render, blob, config)
    elapsed = (time.perf_counter() - start) * 1000
    return RenderResponse(
        scene=scene,
        primitive_count=len(scene.primitives),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/svg", responses=_ERRORS)
async def render_svg(
    request: Request,
    settings: Settings = Depends(get_settings),
    config: RenderConfig = Depends(get_render_config),
) -> Response:
    blob = await _read_body(request, settings)
    loop = asyncio.get_running_loop()
    scene = await loop.run_in_executor(None, render, blob, config)
    return Response(content=serialize_scene(scene), media_type="image/svg+xml")


@router.post("/png", responses=_ERRORS)
async def render_png(
    request: Request,
    settings: Settings = Depends(get_settings),
    config: RenderConfig = Depends(get_render_config),
) -> Response:
    blob = await _read_body(request, settings)
    loop = asyncio.get_running_loop()
    scene = await loop.run_in_executor(None, render, blob, config)
    png = await loop.run_in_executor(None, partial(rasterize_scene, scene, width=settings.png_width))
    return Response(content=png, media_type="image/png")
