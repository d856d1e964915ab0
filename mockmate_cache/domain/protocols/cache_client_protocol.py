"""Cache client protocol.

The contract shared by the real Redis client and the in-memory stand-in
used when Redis is unreachable outside production.

Architecture:
- Protocol-based - uses structural typing
- Every command returns a Result, so a miss (Success(None), Success(0))
  is distinguishable from a store error (Failure(CacheError))
- Replies keep Redis shapes: "OK" for SET/SETEX, integer counts for
  DEL/EXISTS/EXPIRE
"""

from typing import Protocol

from mockmate_cache.core.errors import DomainError
from mockmate_cache.core.result import Result

type InfoValue = str | int | float


class CacheClientProtocol(Protocol):
    """Cache client protocol - the command surface the services need.

    Implementations:
        - RedisCacheClient: networked client over redis.asyncio
        - NullCacheClient: no-op stand-in with fixed replies
    """

    @property
    def is_open(self) -> bool:
        """Whether the client currently holds an open connection."""
        ...

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get value for key.

        Returns:
            Success(value), Success(None) when absent, or Failure.
        """
        ...

    async def set(self, key: str, value: str) -> Result[str, DomainError]:
        """Set value without expiry.

        Returns:
            Success("OK") or Failure.
        """
        ...

    async def setex(
        self, key: str, ttl: int, value: str
    ) -> Result[str, DomainError]:
        """Set value with a time to live in seconds (overwrites, fresh TTL).

        Returns:
            Success("OK") or Failure.
        """
        ...

    async def delete(self, key: str) -> Result[int, DomainError]:
        """Delete key.

        Returns:
            Success(number of keys removed) or Failure.
        """
        ...

    async def exists(self, key: str) -> Result[int, DomainError]:
        """Check key existence.

        Returns:
            Success(1) if present, Success(0) if absent, or Failure.
        """
        ...

    async def expire(self, key: str, ttl: int) -> Result[int, DomainError]:
        """Set expiry on an existing key.

        Returns:
            Success(1) if set, Success(0) if key absent, or Failure.
        """
        ...

    async def ttl(self, key: str) -> Result[int | None, DomainError]:
        """Seconds until expiry.

        Returns:
            Success(seconds), Success(None) when absent or no expiry, or Failure.
        """
        ...

    async def increment(self, key: str, amount: int = 1) -> Result[int, DomainError]:
        """Atomically increment an integer value (created at 0 if absent).

        Returns:
            Success(new value) or Failure.
        """
        ...

    async def info(self) -> Result[dict[str, InfoValue], DomainError]:
        """Server status report as a flat mapping.

        Returns:
            Success(mapping) or Failure.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Health check.

        Returns:
            Success(True) if reachable, or Failure.
        """
        ...

    async def disconnect(self) -> None:
        """Close the underlying connection. Safe to call more than once."""
        ...
