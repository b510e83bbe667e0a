"""GET /api/documents — render .rnote files from the notes directory.

Clients re-request a document whenever they are told its file changed; each
request is an independent render pass.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from rnotesight.dependencies import get_document_source, get_render_config
from rnotesight.engine.assembler import render
from rnotesight.engine.config import RenderConfig
from rnotesight.models.responses import DocumentListResponse, ErrorResponse
from rnotesight.rnote.source import DocumentSource
from rnotesight.svg.serializer import serialize_scene

router = APIRouter(prefix="/documents")
logger = logging.getLogger(__name__)


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    source: DocumentSource = Depends(get_document_source),
) -> DocumentListResponse:
    return DocumentListResponse(documents=source.list_documents())


@router.get(
    "/{name:path}/svg",
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def document_svg(
    name: str,
    source: DocumentSource = Depends(get_document_source),
    config: RenderConfig = Depends(get_render_config),
) -> Response:
    blob = await source.read_bytes(name)
    logger.info("Rendering document %s", name)
    scene = await asyncio.get_running_loop().run_in_executor(None, render, blob, config)
    return Response(content=serialize_scene(scene), media_type="image/svg+xml")
