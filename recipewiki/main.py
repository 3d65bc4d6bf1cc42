#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
RecipeWiki — FastAPI application factory
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipewiki.core.config import Settings, get_settings
from recipewiki.core.exceptions import MalformedPageError, PageEncodingError, RecipeWikiError
from recipewiki.core.storage import build_index, init_storage
from recipewiki.routes import pages, render
from recipewiki.schemas import HealthResponse
from recipewiki.ui import views

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    index = await build_index(app)
    log.info("Serving %d page(s) from %s", len(index), app.state.store.pages_dir)
    yield


# -----------------------------------------------------------------------------

def _is_api(request: Request) -> bool:
    return request.url.path.startswith("/api/")


def _error_page(request: Request, message: str, status_code: int):
    return views.templates.TemplateResponse(
        request,
        "error.html",
        views.base_context(request, message=message),
        status_code=status_code,
    )


# -----------------------------------------------------------------------------

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A flat-file recipe wiki with Markdown and [[WikiLinks]].",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
        debug=settings.debug,
    )

    init_storage(app, settings)

    # ── Static files ──────────────────────────────────────────────────────

    static_dir = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    # ── API routers ───────────────────────────────────────────────────────

    prefix = "/api/v1"

    app.include_router(pages.router,  prefix=prefix)
    app.include_router(render.router, prefix=prefix)

    # ── UI (Jinja2) router ────────────────────────────────────────────────

    app.include_router(views.router)

    # ── Global exception handlers ─────────────────────────────────────────

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code != 404 or _is_api(request):
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
        return _error_page(request, "The page you requested could not be found.", 404)

    @app.exception_handler(MalformedPageError)
    async def malformed_page(request: Request, exc: RecipeWikiError):
        log.warning("%s", exc)
        if _is_api(request):
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": str(exc)},
            )
        return _error_page(request, str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    app.add_exception_handler(PageEncodingError, malformed_page)

    @app.exception_handler(OSError)
    async def storage_error(request: Request, exc: OSError):
        log.exception("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        if _is_api(request):
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error"},
            )
        return _error_page(request, "The page could not be read or written.",
                           status.HTTP_500_INTERNAL_SERVER_ERROR)

    # ── Health check ──────────────────────────────────────────────────────

    @app.get("/api/health", tags=["system"], response_model=HealthResponse)
    async def health():
        return HealthResponse(version=settings.app_version, app=settings.app_name)

    return app


# -----------------------------------------------------------------------------
