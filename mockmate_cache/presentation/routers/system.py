"""System router for health endpoints.

Lightweight, side-effect free endpoints for load balancers and the admin
console's system status page.
"""

import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from mockmate_cache.services import CacheService

system_router = APIRouter(tags=["System"])


def get_cache_service(request: Request) -> CacheService:
    """Cache service owned by the application lifespan."""
    return request.app.state.cache


@system_router.get("/")
async def root(request: Request) -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status and version.
    """
    settings = request.app.state.settings
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status indicator.
    """
    return {"status": "healthy"}


@system_router.get("/health/cache")
async def cache_health(request: Request) -> JSONResponse:
    """Redis health.

    Status:
        - healthy: Redis answers PING
        - degraded: running on the no-op stand-in (development without Redis)
        - unhealthy: Redis unreachable (HTTP 503)

    Returns:
        JSONResponse: Status, connection flag, PING latency and server version.
    """
    cache = get_cache_service(request)

    started = time.perf_counter()
    alive = await cache.ping()
    latency_ms = round((time.perf_counter() - started) * 1000, 2)
    connected = cache.is_connected()

    if alive and connected:
        status = "healthy"
        info = await cache.info()
        version = info.get("redis_version")
        redis_version = str(version) if version is not None else None
    elif alive:
        status = "degraded"
        redis_version = None
    else:
        status = "unhealthy"
        redis_version = None

    return JSONResponse(
        status_code=503 if status == "unhealthy" else 200,
        content={
            "status": status,
            "connected": connected,
            "latency_ms": latency_ms if alive else None,
            "redis_version": redis_version,
        },
    )
