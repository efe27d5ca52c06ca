"""FastAPI app factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ortholocus.config import settings
from ortholocus.errors import OrthoLocusError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.ortholocus_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    # One pooled client per process, shared by every request
    async with httpx.AsyncClient(follow_redirects=True) as http:
        app.state.http = http
        yield


_COORDINATE_FIELDS = frozenset({"latitude", "longitude", "lat", "lng"})

# Checked in order; coordinates win over everything but a broken body
_FIELD_MESSAGES = (
    ("style", "Invalid style"),
    ("zoom", "Invalid zoom"),
    ("size", "Invalid size"),
)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return "Invalid request body"

    fields = {str(part) for err in errors for part in err.get("loc", ())}
    if fields & _COORDINATE_FIELDS:
        return "Invalid coordinates"
    for field, message in _FIELD_MESSAGES:
        if field in fields:
            return message
    return "Invalid coordinates"


def _register_error_handlers(app: FastAPI) -> None:
    """Every error leaves the API as ``{"error": <reason>}``."""

    @app.exception_handler(OrthoLocusError)
    async def _domain_error(request: Request, exc: OrthoLocusError) -> JSONResponse:
        logger.info("%s %s -> %s", request.method, request.url.path, exc.to_error_dict())
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _request_invalid(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.info("%s %s -> 400 %s", request.method, request.url.path, message)
        return JSONResponse({"error": message}, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            {"error": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ortho Locus",
        description="Satellite scan and artwork orchestration backed by Gemini models",
        version="0.1.0",
        lifespan=_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    from ortholocus.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
