"""Redis connection management.

Resolves the Redis URL from settings, establishes the connection and picks
the cache client the services will use:

- Redis reachable: RedisCacheClient
- Redis unreachable, not production: NullCacheClient (logged warning)
- Redis unreachable, production: the original exception propagates

Observers:
    Connect and error observers are registered before connecting. Two are
    installed by default (they log); callers can add more with on_connect()
    and on_error(). Error observers also fire for connection failures seen
    by later commands.
"""

from collections.abc import Callable
from urllib.parse import urlsplit

from redis.asyncio import Redis

from mockmate_cache.core.config import Settings
from mockmate_cache.domain.protocols import CacheClientProtocol, LoggerProtocol
from mockmate_cache.infrastructure.cache.null_client import NullCacheClient
from mockmate_cache.infrastructure.cache.redis_client import RedisCacheClient

RedisFactory = Callable[[str, float], Redis]
ConnectObserver = Callable[[], None]
ErrorObserver = Callable[[Exception], None]


def create_redis_client(url: str, connect_timeout: float) -> Redis:
    """Build an async Redis client (lazy: no I/O until the first command).

    Args:
        url: Redis connection URL.
        connect_timeout: Seconds to wait when opening a connection.

    Returns:
        Redis client returning str replies.
    """
    return Redis.from_url(
        url,
        socket_connect_timeout=connect_timeout,
        decode_responses=True,
    )


def redact_url(url: str) -> str:
    """Return host:port of a Redis URL without credentials."""
    try:
        parts = urlsplit(url)
        host = parts.hostname or "localhost"
        port = parts.port or 6379
    except ValueError:
        return "<unparseable redis url>"
    return f"{host}:{port}"


class RedisConnectionManager:
    """Owns the cache client for one process.

    Created once at startup, connected once, disconnected once at shutdown.
    No pooling beyond redis-py's own and no reconnection logic.

    Attributes:
        _settings: Settings providing the Redis URL, timeout and environment.
        _logger: Structured logger.
        _client: Active cache client (None before connect / after disconnect).
    """

    def __init__(
        self,
        settings: Settings,
        logger: LoggerProtocol,
        *,
        redis_factory: RedisFactory = create_redis_client,
    ) -> None:
        """Initialize the connection manager.

        Args:
            settings: Application settings.
            logger: Structured logger.
            redis_factory: Builds the redis-py client from (url, timeout).
        """
        self._settings = settings
        self._logger = logger
        self._redis_factory = redis_factory
        self._client: CacheClientProtocol | None = None
        self._connect_observers: list[ConnectObserver] = [self._log_connected]
        self._error_observers: list[ErrorObserver] = [self._log_client_error]

    @property
    def client(self) -> CacheClientProtocol | None:
        """Active cache client, None before connect()."""
        return self._client

    def on_connect(self, observer: ConnectObserver) -> None:
        """Register a callback run after the connection is established."""
        self._connect_observers.append(observer)

    def on_error(self, observer: ErrorObserver) -> None:
        """Register a callback run with every connection-level error."""
        self._error_observers.append(observer)

    async def connect(self) -> None:
        """Connect to Redis and install the cache client.

        Raises:
            Exception: The connection error, only when running in production.
        """
        if self._client is not None:
            return

        url = self._settings.redis_url_resolved
        self._logger.info("Connecting to Redis", target=redact_url(url))

        redis_client: Redis | None = None
        try:
            redis_client = self._redis_factory(
                url, self._settings.redis_connect_timeout
            )
            await redis_client.ping()  # type: ignore[misc]
        except Exception as error:
            self._notify_error(error)
            self._logger.error("Failed to connect to Redis", error=error)
            if redis_client is not None:
                await self._close_quietly(redis_client)
            if self._settings.is_production:
                raise
            self._logger.warning(
                "Continuing without Redis in development mode",
                environment=self._settings.environment.value,
            )
            self._client = NullCacheClient()
            return

        self._client = RedisCacheClient(
            redis_client, on_connection_error=self._notify_error
        )
        self._notify_connect()

    def is_connected(self) -> bool:
        """Whether a client exists and reports an open connection."""
        return self._client is not None and self._client.is_open

    async def disconnect(self) -> None:
        """Close the active client, if any. Safe to call at any time."""
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.disconnect()
        self._logger.info("Redis connection closed")

    def _notify_connect(self) -> None:
        for observer in self._connect_observers:
            observer()

    def _notify_error(self, error: Exception) -> None:
        for observer in self._error_observers:
            observer(error)

    def _log_connected(self) -> None:
        self._logger.info("Connected to Redis")

    def _log_client_error(self, error: Exception) -> None:
        self._logger.error("Redis client error", error=error)

    async def _close_quietly(self, redis_client: Redis) -> None:
        # A failed client may still hold a half-open pool.
        try:
            await redis_client.aclose()
        except Exception as error:
            self._logger.debug(
                "Ignoring error while closing failed Redis client",
                error_type=type(error).__name__,
            )
