"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, photobooth.api.routers, photobooth.configs, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from photobooth import __version__
from photobooth.boundary.db.connection import dispose_engines
from photobooth.boundary.db.create_tables import init_models
from photobooth.configs import Settings, get_settings
from photobooth.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)
from .routers import (
    health_router,
    photos_router,
    sessions_router,
    uploads_router,
    users_router,
)

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):
    """Build the startup/shutdown handler bound to the given settings."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Handles startup and shutdown events.
        """
        # Startup
        configure_logging(settings.log_level)
        if settings.database.create_tables:
            await init_models()
            logger.info("Database schema ensured")
        settings.uploads.photos_dir.mkdir(parents=True, exist_ok=True)
        logger.info(
            "Photobooth API started",
            extra={
                "environment": settings.environment,
                "upload_dir": str(settings.uploads.photos_dir),
            },
        )

        yield

        # Shutdown
        await dispose_engines()
        logger.info("Database engines disposed")

    return lifespan


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Answer malformed request bodies and parameters with 400."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings, defaults to the cached singleton

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Photobooth API",
        description="Users, photo sessions and photo uploads",
        version=__version__,
        lifespan=build_lifespan(settings),
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=settings.cors.allow_origins != ["*"],
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
        expose_headers=settings.cors.expose_headers,
        max_age=settings.cors.max_age,
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")
    app.include_router(photos_router, prefix="/api/v1")
    app.include_router(uploads_router, prefix="/api/v1")

    if settings.uploads.serve_static:
        app.mount(
            settings.uploads.public_prefix.rstrip("/"),
            StaticFiles(directory=settings.uploads.root_dir, check_dir=False),
            name="uploads",
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "photobooth.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
