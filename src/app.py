"""Bazar Online Salta storefront API.

Async FastAPI application over a pooled PostgreSQL connection. The pool is
opened by the lifespan before the first request and drained on shutdown.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 5000
    bazarstream                      # same, reading PORT from the environment
"""

from contextlib import asynccontextmanager
from datetime import UTC, datetime

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from shared.config import DEFAULT_CORS_ORIGINS, Settings, get_settings
from shared.db import dispose_engine, init_engine
from shared.errors import ShopError
from shared.logging import configure_logging

logger = structlog.get_logger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


class StorefrontCORSMiddleware(CORSMiddleware):
    """CORS for the storefront allow-list; preflight is answered with an empty 204."""

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            name: value
            for name, value in response.headers.items()
            if name.lower() not in ("content-length", "content-type")
        }
        return Response(status_code=204, headers=headers)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the connection pool before serving and drain it on shutdown."""
    if app.state.settings is None:
        app.state.settings = get_settings()
    settings = app.state.settings

    configure_logging(environment=settings.environment, level=settings.log_level, log_dir=settings.log_dir)
    await init_engine(settings)
    logger.info("Storefront API started", port=settings.port, notify_channel=settings.notify_channel)
    try:
        yield
    finally:
        await dispose_engine()


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="Bazar Online Salta API",
        description="Catalogue, store orders and admin device checks",
        lifespan=lifespan,
    )
    app.state.settings = settings
    allowed_origins = settings.allowed_origins if settings else frozenset(DEFAULT_CORS_ORIGINS)

    # -----------------------------------------------------------------------
    # Error mapping
    # -----------------------------------------------------------------------
    @app.exception_handler(ShopError)
    async def shop_error_handler(request: Request, exc: ShopError):
        if exc.status_code >= 500:
            logger.error("Request failed", path=request.url.path, error=exc.message, code=exc.code)
            message = exc.public_message
        else:
            message = exc.message
        return JSONResponse(status_code=exc.status_code, content={"error": exc.code, "message": message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "error": "VALIDATION_ERROR",
                "message": "Solicitud inválida",
                "detail": jsonable_encoder(exc.errors(), exclude={"ctx", "input"}),
            },
        )

    # Unhandled errors are mapped inside the CORS layer.
    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error", path=request.url.path, error_type=type(exc).__name__)
            return JSONResponse(
                status_code=500,
                content={"error": "INTERNAL_ERROR", "message": "Error interno del servidor"},
            )

    # -----------------------------------------------------------------------
    # CORS: fixed allow-list, preflight answered with an empty 204
    # -----------------------------------------------------------------------
    app.add_middleware(
        StorefrontCORSMiddleware,
        allow_origins=sorted(allowed_origins),
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    from catalogue.api import router as catalogue_router
    from identity.api import router as identity_router
    from ordering.api import router as ordering_router

    app.include_router(identity_router)
    app.include_router(catalogue_router)
    app.include_router(ordering_router)

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return {"ok": True, "time": datetime.now(UTC).isoformat()}

    return app


app = create_app()


def main():
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
