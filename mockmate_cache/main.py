"""
FastAPI application entry point.

The lifespan owns the cache services: they are built and connected on
startup, stored on ``app.state`` and disconnected on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mockmate_cache.core.config import Settings, get_settings
from mockmate_cache.core.container import build_cache_services, get_logger
from mockmate_cache.domain.protocols import LoggerProtocol
from mockmate_cache.presentation.routers import system_router


def create_app(
    settings: Settings | None = None,
    logger: LoggerProtocol | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings override (tests); defaults to environment settings.
        logger: Logger override (tests); defaults to the application logger.

    Returns:
        FastAPI: Configured application.
    """
    settings = settings or get_settings()
    logger = logger or get_logger()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan context manager.

        - Startup: build and connect cache services (raises in production
          when Redis is unreachable)
        - Shutdown: close the Redis connection
        """
        services = build_cache_services(settings, logger)
        await services.cache.connect()
        app.state.settings = settings
        app.state.cache = services.cache
        app.state.tokens = services.tokens
        app.state.sessions = services.sessions
        app.state.sockets = services.sockets

        yield

        await services.cache.disconnect()

    app = FastAPI(
        title=settings.app_name,
        description="Admin token and session cache for MockMate",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(system_router)
    return app
