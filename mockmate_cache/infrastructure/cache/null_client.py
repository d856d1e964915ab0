"""No-op cache client used when Redis is unreachable outside production.

Lets the application start and serve requests in local development without a
Redis server. Nothing is stored: reads miss, writes report success.

Fixed replies:
    get -> None, set/setex -> "OK", delete -> 1, exists -> 0,
    expire -> 1, ttl -> None, increment -> amount, info -> {},
    ping -> True
"""

from mockmate_cache.core.result import Result, Success
from mockmate_cache.domain.protocols import InfoValue
from mockmate_cache.infrastructure.errors import CacheError


class NullCacheClient:
    """In-memory stand-in implementing CacheClientProtocol.

    Note: Does NOT inherit from CacheClientProtocol (uses structural typing).
    Reports ``is_open`` as False so health checks show the degraded state.
    """

    @property
    def is_open(self) -> bool:
        """Never connected."""
        return False

    async def get(self, key: str) -> Result[str | None, CacheError]:
        return Success(value=None)

    async def set(self, key: str, value: str) -> Result[str, CacheError]:
        return Success(value="OK")

    async def setex(self, key: str, ttl: int, value: str) -> Result[str, CacheError]:
        return Success(value="OK")

    async def delete(self, key: str) -> Result[int, CacheError]:
        return Success(value=1)

    async def exists(self, key: str) -> Result[int, CacheError]:
        return Success(value=0)

    async def expire(self, key: str, ttl: int) -> Result[int, CacheError]:
        return Success(value=1)

    async def ttl(self, key: str) -> Result[int | None, CacheError]:
        return Success(value=None)

    async def increment(self, key: str, amount: int = 1) -> Result[int, CacheError]:
        return Success(value=amount)

    async def info(self) -> Result[dict[str, InfoValue], CacheError]:
        return Success(value={})

    async def ping(self) -> Result[bool, CacheError]:
        return Success(value=True)

    async def disconnect(self) -> None:
        return None
