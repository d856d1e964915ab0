"""Redis client implementing CacheClientProtocol.

Wraps an async redis-py client, maps Redis exceptions to CacheError and
returns Result types for every command.

Architecture:
- Implements CacheClientProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError with InfrastructureErrorCode
- Tracks connection state for is_open (cleared on connection errors,
  restored by the next successful command)
- Optional connection-error observer, invoked on ConnectionError/TimeoutError
"""

from collections.abc import Callable
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from mockmate_cache.core.enums import ErrorCode
from mockmate_cache.core.result import Failure, Result, Success
from mockmate_cache.domain.protocols import InfoValue
from mockmate_cache.infrastructure.cache.cache_keys import mask_key
from mockmate_cache.infrastructure.cache.info_parser import normalize_info
from mockmate_cache.infrastructure.enums import InfrastructureErrorCode
from mockmate_cache.infrastructure.errors import CacheError

ErrorObserver = Callable[[Exception], None]


class RedisCacheClient:
    """Redis implementation of CacheClientProtocol.

    Note: Does NOT inherit from CacheClientProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
        _open: Whether the last interaction with Redis succeeded.
        _on_connection_error: Observer for connection-level failures.
    """

    def __init__(
        self,
        redis_client: Redis,
        *,
        on_connection_error: ErrorObserver | None = None,
        connected: bool = True,
    ) -> None:
        """Initialize Redis client wrapper.

        Args:
            redis_client: Async Redis client instance (decode_responses=True).
            on_connection_error: Called with the exception when Redis is
                unreachable during a command.
            connected: Initial connection state (True after a successful PING).
        """
        self._redis = redis_client
        self._on_connection_error = on_connection_error
        self._open = connected

    @property
    def is_open(self) -> bool:
        """Whether the client currently holds an open connection."""
        return self._open

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except Exception as e:
            return self._failure(
                "GET", InfrastructureErrorCode.CACHE_GET_ERROR, e, key=key
            )
        self._open = True
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return Success(value=value)

    async def set(self, key: str, value: str) -> Result[str, CacheError]:
        """Set value in Redis without expiry.

        Args:
            key: Cache key.
            value: Value to store.

        Returns:
            Result with "OK" on success, or CacheError.
        """
        try:
            await self._redis.set(key, value)
        except Exception as e:
            return self._failure(
                "SET", InfrastructureErrorCode.CACHE_SET_ERROR, e, key=key
            )
        self._open = True
        return Success(value="OK")

    async def setex(self, key: str, ttl: int, value: str) -> Result[str, CacheError]:
        """Set value in Redis with a TTL.

        Args:
            key: Cache key.
            ttl: Time to live in seconds.
            value: Value to store.

        Returns:
            Result with "OK" on success, or CacheError.
        """
        try:
            await self._redis.setex(key, ttl, value)
        except Exception as e:
            return self._failure(
                "SETEX", InfrastructureErrorCode.CACHE_SET_ERROR, e, key=key, ttl=ttl
            )
        self._open = True
        return Success(value="OK")

    async def delete(self, key: str) -> Result[int, CacheError]:
        """Delete key from Redis.

        Args:
            key: Cache key to delete.

        Returns:
            Result with number of keys removed, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(key)
        except Exception as e:
            return self._failure(
                "DEL", InfrastructureErrorCode.CACHE_DELETE_ERROR, e, key=key
            )
        self._open = True
        return Success(value=int(deleted_count))

    async def exists(self, key: str) -> Result[int, CacheError]:
        """Check if key exists in Redis.

        Args:
            key: Cache key to check.

        Returns:
            Result with 1 if present, 0 if absent, or CacheError.
        """
        try:
            exists_count = await self._redis.exists(key)
        except Exception as e:
            return self._failure(
                "EXISTS", InfrastructureErrorCode.CACHE_GET_ERROR, e, key=key
            )
        self._open = True
        return Success(value=1 if exists_count else 0)

    async def expire(self, key: str, ttl: int) -> Result[int, CacheError]:
        """Set expiration on key in Redis.

        Args:
            key: Cache key.
            ttl: Seconds until expiration.

        Returns:
            Result with 1 if timeout set, 0 if key doesn't exist, or CacheError.
        """
        try:
            was_set = await self._redis.expire(key, ttl)
        except Exception as e:
            return self._failure(
                "EXPIRE", InfrastructureErrorCode.CACHE_SET_ERROR, e, key=key, ttl=ttl
            )
        self._open = True
        return Success(value=1 if was_set else 0)

    async def ttl(self, key: str) -> Result[int | None, CacheError]:
        """Get time to live for key in Redis.

        Args:
            key: Cache key.

        Returns:
            Result with seconds until expiration, None if no TTL or key
            doesn't exist, or CacheError.
        """
        try:
            ttl_value = await self._redis.ttl(key)
        except Exception as e:
            return self._failure(
                "TTL", InfrastructureErrorCode.CACHE_GET_ERROR, e, key=key
            )
        self._open = True
        # Redis returns -2 if key doesn't exist, -1 if no expiration
        if ttl_value in (-2, -1):
            return Success(value=None)
        return Success(value=ttl_value)

    async def increment(self, key: str, amount: int = 1) -> Result[int, CacheError]:
        """Increment value in Redis (atomic).

        Args:
            key: Cache key.
            amount: Amount to increment by.

        Returns:
            Result with new value after increment, or CacheError.
        """
        try:
            new_value = await self._redis.incrby(key, amount)
        except Exception as e:
            return self._failure(
                "INCRBY",
                InfrastructureErrorCode.CACHE_SET_ERROR,
                e,
                key=key,
                amount=amount,
            )
        self._open = True
        return Success(value=int(new_value))

    async def info(self) -> Result[dict[str, InfoValue], CacheError]:
        """Get the Redis INFO report as a flat mapping.

        Returns:
            Result with parsed report, or CacheError.
        """
        try:
            raw = await self._redis.info()
        except Exception as e:
            return self._failure("INFO", InfrastructureErrorCode.CACHE_INFO_ERROR, e)
        self._open = True
        return Success(value=normalize_info(raw))

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check).

        Returns:
            Result with True if Redis is reachable, or CacheError.
        """
        try:
            await self._redis.ping()  # type: ignore[misc]
        except Exception as e:
            return self._failure(
                "PING", InfrastructureErrorCode.CACHE_CONNECTION_ERROR, e
            )
        self._open = True
        return Success(value=True)

    async def disconnect(self) -> None:
        """Close the Redis client and its connection pool."""
        self._open = False
        await self._redis.aclose()

    def _failure(
        self,
        command: str,
        infrastructure_code: InfrastructureErrorCode,
        error: Exception,
        **details: Any,
    ) -> Failure[CacheError]:
        """Build a CacheError failure and update connection state.

        Args:
            command: Redis command name.
            infrastructure_code: Cache-specific error code.
            error: Exception raised by redis-py.
            **details: Extra context (key, ttl, ...).

        Returns:
            Failure wrapping CacheError.
        """
        code = ErrorCode.CACHE_OPERATION_FAILED
        if isinstance(error, (RedisConnectionError, RedisTimeoutError)):
            self._open = False
            code = ErrorCode.CACHE_UNAVAILABLE
            if isinstance(error, RedisTimeoutError):
                infrastructure_code = InfrastructureErrorCode.CACHE_TIMEOUT
            if self._on_connection_error is not None:
                self._on_connection_error(error)

        if "key" in details:
            details["key"] = mask_key(details["key"])

        message = (
            f"Redis {command} failed"
            if isinstance(error, RedisError)
            else f"Unexpected error during Redis {command}"
        )
        return Failure(
            error=CacheError(
                code=code,
                infrastructure_code=infrastructure_code,
                message=message,
                details={
                    "command": command,
                    "error": str(error),
                    "type": type(error).__name__,
                    **details,
                },
            )
        )
