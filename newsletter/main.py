"""
Main FastAPI application entry point.

This module builds the FastAPI application: middleware, exception handlers
and routers, plus command wiring verification at startup.

Run locally:
    uvicorn newsletter.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from newsletter.application.cqrs.registry import verify_command_registry
from newsletter.core.config import Settings, settings
from newsletter.core.container import get_database, get_logger
from newsletter.presentation.api import api_router
from newsletter.presentation.api.errors import register_exception_handlers
from newsletter.presentation.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Verify command registry, optionally create tables
    - Shutdown: Dispose database connections

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    app_settings: Settings = app.state.settings
    logger = get_logger()

    # Startup: fail fast on wiring mistakes
    verify_command_registry()

    if app_settings.db_create_tables:
        await get_database().create_all()
        logger.info("Database tables created")

    logger.info(
        "Application started",
        environment=app_settings.environment.value,
        version=app_settings.app_version,
    )

    yield

    # Shutdown: close pooled connections
    await get_database().close()
    logger.info("Application stopped")


async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        app_settings: Settings to build from (defaults to the global settings).

    Returns:
        FastAPI: Configured application.
    """
    app_settings = app_settings or settings

    application = FastAPI(
        title=app_settings.app_name,
        description="Create and store newsletter articles",
        version=app_settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    application.state.settings = app_settings

    # Wire trace middleware (request correlation)
    application.add_middleware(TraceMiddleware)

    if app_settings.https_redirect:
        application.add_middleware(HTTPSRedirectMiddleware)

    # Register global exception handlers ({code, message} error responses)
    register_exception_handlers(application)

    # Include API routers
    application.include_router(api_router)
    application.add_api_route("/health", health, methods=["GET"])

    return application


app = create_app()
