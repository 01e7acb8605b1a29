"""FastAPI application entry point for the Global Exception Handling API."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from global_exception_api.config import Settings, get_settings
from global_exception_api.logging_config import setup_logging
from global_exception_api.middleware import GlobalExceptionMiddleware
from global_exception_api.routes.demo import router as demo_router

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    timestamp: str


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info("%s starting up", settings.app_name)

    yield

    logger.info("%s shutting down", settings.app_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; loaded from the environment when omitted.
    """
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Web API with centralized translation of unhandled exceptions",
        lifespan=lifespan,
    )
    application.state.settings = settings

    # Added before CORS so CORS wraps it and error responses keep CORS headers
    application.add_middleware(GlobalExceptionMiddleware)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/")
    async def root() -> dict:
        """Root endpoint with API info."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "health": "/health",
        }

    @application.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Liveness probe."""
        return HealthResponse(
            status="healthy",
            version=settings.app_version,
            timestamp=datetime.now(tz=UTC).isoformat(),
        )

    if settings.enable_demo_routes:
        application.include_router(demo_router)

    return application


app = create_app()
