"""Dependency factories (composition root).

Adapter selection is centralized here. The cache services are built
explicitly and owned by the application lifespan (see main.py) rather than
kept as module globals, so tests can build their own instances.

Usage:
    from mockmate_cache.core.container import build_cache_services

    services = build_cache_services()
    await services.cache.connect()
"""

from dataclasses import dataclass
from functools import lru_cache

from mockmate_cache.core.config import Settings, get_settings
from mockmate_cache.domain.protocols import LoggerProtocol
from mockmate_cache.infrastructure.cache import RedisConnectionManager
from mockmate_cache.services import (
    AdminTokenService,
    CacheService,
    SessionService,
    SocketConnectionService,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheServices:
    """Services sharing one cache connection.

    Attributes:
        cache: Generic cache operations and the connection lifecycle.
        tokens: Admin refresh tokens, blacklist and login attempts.
        sessions: Session payloads.
        sockets: Live socket connection records.
    """

    cache: CacheService
    tokens: AdminTokenService
    sessions: SessionService
    sockets: SocketConnectionService


@lru_cache()
def get_logger() -> LoggerProtocol:
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from mockmate_cache.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


def build_cache_services(
    settings: Settings | None = None,
    logger: LoggerProtocol | None = None,
) -> CacheServices:
    """Build the cache service and the services layered on it.

    Args:
        settings: Settings to use (defaults to environment settings).
        logger: Logger to use (defaults to the application logger).

    Returns:
        CacheServices: Services over one unconnected CacheService.
    """
    settings = settings or get_settings()
    logger = logger or get_logger()

    connection = RedisConnectionManager(settings, logger.bind(component="redis"))
    cache = CacheService(connection=connection, logger=logger.bind(component="cache"))
    return CacheServices(
        cache=cache,
        tokens=AdminTokenService(
            cache=cache,
            logger=logger.bind(component="admin_tokens"),
            settings=settings,
        ),
        sessions=SessionService(
            cache=cache,
            logger=logger.bind(component="sessions"),
            settings=settings,
        ),
        sockets=SocketConnectionService(
            cache=cache,
            logger=logger.bind(component="sockets"),
        ),
    )
