from __future__ import annotations

import time
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import (
    http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from oga_catalog.catalog import CharacterCatalog, default_catalog
from oga_catalog.pack_loader import catalog_hash, load_catalog_file

from oga_edge.core.config import Settings, brand_from_settings, parse_csv
from oga_edge.crawlers import crawler_patterns
from oga_edge.invite_preview import PreviewConfig, build_invite_preview
from oga_edge.jsonlog import log_json


def _load_catalog(settings: Settings) -> CharacterCatalog:
    if settings.characters_path:
        return load_catalog_file(settings.characters_path)
    return default_catalog()


def build_preview_config(settings: Settings) -> PreviewConfig:
    return PreviewConfig(
        catalog=_load_catalog(settings),
        brand=brand_from_settings(settings),
        patterns=crawler_patterns(parse_csv(settings.extra_crawler_patterns)),
        route=settings.invite_route,
        cache_max_age=settings.cache_max_age,
    )


def _raw_path(request: Request) -> str:
    # Percent-encoding is kept so %2F or %3F inside a segment stays in that segment.
    raw = request.scope.get("raw_path") or b""
    path = raw.decode("latin-1").partition("?")[0]
    return path or request.url.path


def _with_request_id(request: Request, resp: Response) -> Response:
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        resp.headers["X-Request-Id"] = str(request_id)
    return resp


def create_app(*, settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    preview_config = build_preview_config(settings)
    preview_catalog_hash = catalog_hash(preview_config.catalog)

    app = FastAPI(
        title="OGA Invite Preview",
        version="0.1.0",
        openapi_url="/api/openapi.json",
        docs_url="/docs",
    )
    app.state.settings = settings
    app.state.preview_config = preview_config

    @app.middleware("http")
    async def _invite_preview(request: Request, call_next):
        preview = build_invite_preview(
            user_agent=request.headers.get("user-agent"),
            path=_raw_path(request),
            config=preview_config,
        )
        if preview is None:
            return await call_next(request)

        if settings.log_json:
            log_json(
                {
                    "level": "info",
                    "event": "invite_preview",
                    "request_id": getattr(request.state, "request_id", None),
                    "invite_code": preview.invite_code,
                    "character_id": preview.character_id,
                    "kind": preview.metadata.kind,
                }
            )
        return preview.response

    @app.middleware("http")
    async def _request_context(request: Request, call_next):
        start = time.perf_counter()
        request_id = request.headers.get("x-request-id") or f"req_{uuid4().hex}"
        request.state.request_id = request_id

        def _access_line(level: str, status: int) -> None:
            if settings.log_json:
                log_json(
                    {
                        "level": level,
                        "request_id": request_id,
                        "method": request.method,
                        "path": request.url.path,
                        "status": status,
                        "duration_ms": round((time.perf_counter() - start) * 1000.0, 2),
                    }
                )

        try:
            response = await call_next(request)
        except Exception:
            _access_line("error", 500)
            raise

        response.headers["X-Request-Id"] = request_id
        _access_line("info", response.status_code)
        return response

    # Host checks wrap the preview middleware so crawlers cannot bypass them.
    allowed_hosts = parse_csv(settings.allowed_hosts) or ["*"]
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)

    if settings.trust_proxy_headers:
        # Trust X-Forwarded-* headers when behind a reverse proxy.
        app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

    @app.exception_handler(HTTPException)
    async def _http_exception(request: Request, exc: HTTPException):
        return _with_request_id(request, await http_exception_handler(request, exc))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        return _with_request_id(
            request, await request_validation_exception_handler(request, exc)
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        _ = exc
        return _with_request_id(
            request,
            JSONResponse(status_code=500, content={"detail": "Internal Server Error"}),
        )

    @app.get("/api/health")
    def health() -> dict[str, object]:
        return {
            "status": "ok",
            "characters": len(preview_config.catalog),
            "catalog_hash": preview_catalog_hash,
        }

    from oga_edge.routers import og

    app.include_router(og.router)

    if settings.spa_dir:
        # Mounted last so API routes win; everything else falls through to the SPA.
        app.mount("/", StaticFiles(directory=settings.spa_dir, html=True), name="spa")

    return app


app = create_app()
