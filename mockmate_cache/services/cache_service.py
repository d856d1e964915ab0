"""Fault-tolerant cache operations.

CacheService is the single entry point the rest of the backend uses for
Redis. Each operation is isolated: failures are logged with the command and
key, and a neutral value is returned instead of raising.

Neutral values:
    get -> None, set/setex -> None, delete -> 0, exists -> 0,
    expire -> 0, info -> {}, ttl -> None, increment -> 0, ping -> False,
    get_json -> None, set_json -> None

Callers cannot tell "absent" from "store unreachable" through these
values; consult is_connected() or ping() when that matters.

Usage:
    service = CacheService(connection=manager, logger=logger)
    await service.connect()
    await service.set("greeting", "hello", ttl=60)
    value = await service.get("greeting")
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from mockmate_cache.core.enums import ErrorCode
from mockmate_cache.core.errors import DomainError
from mockmate_cache.core.result import Failure, Result, Success
from mockmate_cache.domain.protocols import (
    CacheClientProtocol,
    InfoValue,
    LoggerProtocol,
)
from mockmate_cache.infrastructure.cache.cache_keys import mask_key
from mockmate_cache.infrastructure.cache.connection_manager import (
    RedisConnectionManager,
)
from mockmate_cache.infrastructure.enums import InfrastructureErrorCode
from mockmate_cache.infrastructure.errors import CacheError

T = TypeVar("T")

ClientCall = Callable[[CacheClientProtocol], Awaitable[Result[T, DomainError]]]


class CacheService:
    """Non-throwing cache operations over the managed client.

    Attributes:
        _connection: Connection manager owning the client.
        _logger: Structured logger.
    """

    def __init__(
        self,
        connection: RedisConnectionManager,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize cache service.

        Args:
            connection: Connection manager (not yet connected is fine).
            logger: Structured logger.
        """
        self._connection = connection
        self._logger = logger

    async def connect(self) -> None:
        """Connect to Redis (raises only in production on failure)."""
        await self._connection.connect()

    async def disconnect(self) -> None:
        """Close the connection; no-op when never connected."""
        await self._connection.disconnect()

    def is_connected(self) -> bool:
        """Whether the client reports an open connection."""
        return self._connection.is_connected()

    async def get(self, key: str) -> str | None:
        """Get value for key.

        Returns:
            Stored string, or None when absent or on failure.
        """
        result = await self._call("GET", key, lambda client: client.get(key))
        match result:
            case Success(value=value):
                return value
            case _:
                return None

    async def set(self, key: str, value: str, ttl: int | None = None) -> str | None:
        """Set value, with SETEX semantics when a non-zero ttl is given.

        Args:
            key: Cache key.
            value: String value.
            ttl: Optional time to live in seconds.

        Returns:
            "OK" on success, None on failure.
        """
        if ttl:
            return await self.setex(key, ttl, value)
        result = await self._call("SET", key, lambda client: client.set(key, value))
        match result:
            case Success(value=reply):
                return reply
            case _:
                return None

    async def setex(self, key: str, ttl: int, value: str) -> str | None:
        """Set value with a time to live.

        Returns:
            "OK" on success, None on failure.
        """
        result = await self._call(
            "SETEX", key, lambda client: client.setex(key, ttl, value)
        )
        match result:
            case Success(value=reply):
                return reply
            case _:
                return None

    async def delete(self, key: str) -> int:
        """Delete key (Redis DEL).

        Returns:
            Number of keys removed; 0 on failure.
        """
        result = await self._call("DEL", key, lambda client: client.delete(key))
        match result:
            case Success(value=count):
                return count
            case _:
                return 0

    async def exists(self, key: str) -> int:
        """Check key existence.

        Returns:
            1 if present, 0 if absent or on failure.
        """
        result = await self._call("EXISTS", key, lambda client: client.exists(key))
        match result:
            case Success(value=count):
                return count
            case _:
                return 0

    async def expire(self, key: str, ttl: int) -> int:
        """Set expiry on key.

        Returns:
            1 if applied, 0 if key absent or on failure.
        """
        result = await self._call(
            "EXPIRE", key, lambda client: client.expire(key, ttl)
        )
        match result:
            case Success(value=applied):
                return applied
            case _:
                return 0

    async def ttl(self, key: str) -> int | None:
        """Seconds until key expires; None when absent, persistent or on failure."""
        result = await self._call("TTL", key, lambda client: client.ttl(key))
        match result:
            case Success(value=seconds):
                return seconds
            case _:
                return None

    async def increment(self, key: str, amount: int = 1) -> int:
        """Atomically increment key; 0 on failure."""
        result = await self._call(
            "INCRBY", key, lambda client: client.increment(key, amount)
        )
        match result:
            case Success(value=count):
                return count
            case _:
                return 0

    async def info(self) -> dict[str, InfoValue]:
        """Redis INFO report as a flat mapping; {} on failure."""
        result = await self._call("INFO", None, lambda client: client.info())
        match result:
            case Success(value=report):
                return report
            case _:
                return {}

    async def ping(self) -> bool:
        """Health check; False when Redis is unreachable."""
        result = await self._call("PING", None, lambda client: client.ping())
        match result:
            case Success(value=alive):
                return alive
            case _:
                return False

    async def get_json(self, key: str) -> dict[str, Any] | None:
        """Get a JSON object stored under key.

        Returns:
            Decoded object, or None when absent, not a JSON object or on
            failure.
        """
        raw = await self.get(key)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            self._log_serialization_failure("GET", key, e)
            return None
        if not isinstance(value, dict):
            error = TypeError(f"expected a JSON object, got {type(value).__name__}")
            self._log_serialization_failure("GET", key, error)
            return None
        return value

    async def set_json(
        self, key: str, value: dict[str, Any], ttl: int | None = None
    ) -> str | None:
        """Store a JSON-serializable object (SETEX semantics when ttl is given).

        Returns:
            "OK" on success, None when the value cannot be serialized or on
            failure.
        """
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            self._log_serialization_failure("SET", key, e)
            return None
        return await self.set(key, serialized, ttl=ttl)

    async def _call(
        self,
        command: str,
        key: str | None,
        operation: ClientCall[T],
    ) -> Result[T, DomainError]:
        """Run one client call in isolation and log failures.

        Args:
            command: Redis command name (for logs).
            key: Key involved, if any (masked in logs).
            operation: Coroutine factory receiving the active client.

        Returns:
            The client's Result, or Failure when not connected or the
            client raised unexpectedly.
        """
        client = self._connection.client
        result: Result[T, DomainError]
        if client is None:
            result = Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_NOT_CONNECTED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    message="Cache client is not connected",
                    details={"command": command},
                )
            )
        else:
            try:
                result = await operation(client)
            except Exception as e:
                result = Failure(
                    error=CacheError(
                        code=ErrorCode.CACHE_OPERATION_FAILED,
                        message=f"Unexpected error during Redis {command}",
                        details={"command": command, "type": type(e).__name__},
                    )
                )

        if isinstance(result, Failure):
            context: dict[str, str] = {
                "command": command,
                "error_code": result.error.code.value,
                "reason": result.error.message,
            }
            if key is not None:
                context["key"] = mask_key(key)
            self._logger.error("Redis operation failed", **context)
        return result

    def _log_serialization_failure(
        self, command: str, key: str, error: Exception
    ) -> None:
        self._logger.error(
            "Cache value serialization failed",
            command=command,
            error_code=ErrorCode.CACHE_SERIALIZATION_FAILED.value,
            reason=str(error),
            key=mask_key(key),
        )
