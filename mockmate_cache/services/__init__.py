"""Application services built on the cache client."""

from mockmate_cache.services.cache_service import CacheService
from mockmate_cache.services.session_service import (
    SessionService,
    SocketConnectionService,
)
from mockmate_cache.services.token_service import AdminTokenService

__all__ = [
    "AdminTokenService",
    "CacheService",
    "SessionService",
    "SocketConnectionService",
]
