"""FastAPI application proxying meeting rooms to the conferencing server."""
from __future__ import annotations

import base64
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from .core.config import settings
from .pages import ADMIN_PAGE, DASHBOARD_PAGE, SIGN_IN_PAGE
from .routers import admin, rooms
from .services.errors import ConfigError, GatewayError, NotFoundError, RemoteProtocolError

logger = logging.getLogger(__name__)

app = FastAPI(title="Meeting Rooms Gateway", version="0.1.0")

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(rooms.router, prefix="/api", tags=["rooms"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])


def _status_for(exc: GatewayError) -> int:
    if isinstance(exc, ConfigError):
        return 500
    if isinstance(exc, NotFoundError):
        return 400
    if isinstance(exc, RemoteProtocolError) and exc.status_code is not None:
        # create/end answered with a non-2xx status
        return 500
    return 502


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Turn gateway failures into the JSON error shape the pages expect."""

    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed [%s]: %s", request.method, request.url.path, exc.error_key, exc.message)
    else:
        logger.info("%s %s rejected [%s]: %s", request.method, request.url.path, exc.error_key, exc.message)
    if exc.raw_payload:
        logger.debug("Raw payload for [%s]: %s", exc.error_key, exc.raw_payload)

    content: dict[str, object] = {"success": False, "error": exc.message, "errorKey": exc.error_key}
    if exc.raw_payload and isinstance(exc, RemoteProtocolError):
        content["response"] = exc.raw_payload
    return JSONResponse(status_code=status_code, content=content)


@app.get("/", response_class=HTMLResponse, tags=["pages"])
async def index() -> HTMLResponse:
    """Serve the sign-in page."""

    return HTMLResponse(content=SIGN_IN_PAGE)


@app.head("/", tags=["meta"])
async def index_head() -> Response:
    """Fast health checks issue HEAD /; answer with 200 to avoid noisy 405s."""

    return Response(status_code=200)


@app.get("/dashboard", response_class=HTMLResponse, tags=["pages"])
async def dashboard() -> HTMLResponse:
    """Serve the learner dashboard with the general and level rooms."""

    return HTMLResponse(content=DASHBOARD_PAGE)


@app.get("/admin", response_class=HTMLResponse, tags=["pages"])
async def admin_panel() -> HTMLResponse:
    """Serve the admin panel; the page sends non-admin names back to sign-in."""

    return HTMLResponse(content=ADMIN_PAGE)


FAVICON_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR4nGMAAQAABQABDQottAAAAABJRU5ErkJggg=="
)


@app.get("/api/health", tags=["meta"])
async def health() -> dict[str, str]:
    """Liveness check that also reports whether the conferencing server is configured."""

    conferencing = "configured" if settings.credentials() is not None else "missing"
    return {"status": "ok", "conferencing": conferencing}


@app.head("/api/health", tags=["meta"])
async def health_head() -> Response:
    """Allow HEAD for uptime monitors that only need the status code."""

    return Response(status_code=200)


@app.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
async def robots() -> PlainTextResponse:
    """Serve a minimal robots.txt to avoid 404 noise."""

    return PlainTextResponse("User-agent: *\nDisallow:")


@app.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    """Return a tiny placeholder favicon."""

    return Response(content=FAVICON_BYTES, media_type="image/png")
