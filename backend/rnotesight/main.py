"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rnotesight.config import settings
from rnotesight.rnote.errors import DocumentNotFound, RenderError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.rnotesight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="RnoteSight",
        description="Rnote note renderer — compressed .rnote files to vector scenes",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    from rnotesight.api.router import api_router

    app.include_router(api_router)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    """A failed render is reported once, in place of the scene."""

    @app.exception_handler(RenderError)
    async def render_error(request: Request, exc: RenderError) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc.describe())
        return JSONResponse(
            status_code=422,
            content={"error": type(exc).__name__, "message": exc.describe()},
        )

    @app.exception_handler(DocumentNotFound)
    async def document_not_found(request: Request, exc: DocumentNotFound) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"error": "DocumentNotFound", "message": f"No such document: {exc}"},
        )


app = create_app()
