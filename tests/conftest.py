"""Shared pytest fixtures.

Cache fixtures build fresh instances per test (no singletons):
- fake_redis: in-memory Redis emulation (fakeredis)
- connection_manager / cache_service / token_service / session_service /
  socket_service: wired on fake_redis
- broken_redis: redis-py stand-in whose commands all fail with ConnectionError
"""

from unittest.mock import AsyncMock, Mock

import fakeredis
import fakeredis.aioredis
import pytest
import pytest_asyncio
from redis.exceptions import ConnectionError as RedisConnectionError

from mockmate_cache.core.config import Settings
from mockmate_cache.core.enums import Environment
from mockmate_cache.infrastructure.cache import RedisConnectionManager
from mockmate_cache.services import (
    AdminTokenService,
    CacheService,
    SessionService,
    SocketConnectionService,
)

REDIS_COMMANDS = ("get", "set", "setex", "delete", "exists", "expire", "ttl", "incrby", "info")


def make_settings(**overrides) -> Settings:
    """Settings isolated from the machine's environment variables."""
    values = {
        "environment": Environment.TESTING,
        "redis_url": None,
        "redis_host": "localhost",
        "redis_port": "6379",
        "node_env": None,
        "redis_username": None,
        "redis_password": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def mock_logger():
    """Mock logger; bind() returns the same mock so calls stay observable."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest_asyncio.fixture
async def fake_redis():
    """Fresh in-memory Redis per test."""
    client = fakeredis.aioredis.FakeRedis(
        server=fakeredis.FakeServer(), decode_responses=True
    )
    yield client
    await client.aclose()


@pytest.fixture
def broken_redis():
    """redis-py stand-in: PING works, every other command raises ConnectionError."""
    client = AsyncMock()
    client.ping.return_value = True
    for name in REDIS_COMMANDS:
        getattr(client, name).side_effect = RedisConnectionError("Connection refused")
    return client


@pytest.fixture
def unreachable_redis():
    """redis-py stand-in that cannot connect at all."""
    client = AsyncMock()
    client.ping.side_effect = RedisConnectionError(
        "Error 111 connecting to localhost:6379. Connection refused."
    )
    return client


@pytest.fixture
def connection_manager(settings, mock_logger, fake_redis) -> RedisConnectionManager:
    return RedisConnectionManager(
        settings, mock_logger, redis_factory=lambda url, timeout: fake_redis
    )


@pytest_asyncio.fixture
async def cache_service(connection_manager, mock_logger):
    """Connected CacheService backed by fakeredis."""
    service = CacheService(connection=connection_manager, logger=mock_logger)
    await service.connect()
    yield service
    await service.disconnect()


@pytest.fixture
def token_service(cache_service, mock_logger, settings) -> AdminTokenService:
    return AdminTokenService(cache=cache_service, logger=mock_logger, settings=settings)


@pytest.fixture
def session_service(cache_service, mock_logger, settings) -> SessionService:
    return SessionService(cache=cache_service, logger=mock_logger, settings=settings)


@pytest.fixture
def socket_service(cache_service, mock_logger) -> SocketConnectionService:
    return SocketConnectionService(cache=cache_service, logger=mock_logger)
