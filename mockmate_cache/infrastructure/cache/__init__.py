"""Cache infrastructure package.

Architecture:
- RedisCacheClient: Redis implementation of CacheClientProtocol
- NullCacheClient: no-op stand-in used when Redis is unreachable (non-production)
- RedisConnectionManager: resolves the URL, connects and selects the client
- cache_keys: key builders for admin token records
- info_parser: INFO report parsing
"""

from mockmate_cache.infrastructure.cache.connection_manager import (
    RedisConnectionManager,
    create_redis_client,
)
from mockmate_cache.infrastructure.cache.info_parser import normalize_info, parse_info
from mockmate_cache.infrastructure.cache.null_client import NullCacheClient
from mockmate_cache.infrastructure.cache.redis_client import RedisCacheClient

__all__ = [
    "NullCacheClient",
    "RedisCacheClient",
    "RedisConnectionManager",
    "create_redis_client",
    "normalize_info",
    "parse_info",
]
