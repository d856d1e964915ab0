"""Session storage and live socket tracking on top of CacheService.

Sessions:
    ``session:{session_id}`` holds a JSON object for the session, expiring
    after 24 hours unless extended.

Socket connections:
    ``socket:{user_id}`` records the user's current socket id and when it
    connected. No TTL: the record lives until the socket disconnects.
"""

import time
from typing import Any

from mockmate_cache.core.config import Settings
from mockmate_cache.domain.protocols import LoggerProtocol
from mockmate_cache.infrastructure.cache.cache_keys import session_key, socket_key
from mockmate_cache.services.cache_service import CacheService


class SessionService:
    """Session payload storage.

    Attributes:
        _cache: Cache operations (non-throwing).
        _logger: Structured logger. Session ids are never logged in full.
        _session_ttl: Default session lifetime in seconds.
    """

    def __init__(
        self,
        cache: CacheService,
        logger: LoggerProtocol,
        settings: Settings,
    ) -> None:
        self._cache = cache
        self._logger = logger
        self._session_ttl = settings.session_ttl_seconds

    async def store_session(
        self,
        session_id: str,
        data: dict[str, Any],
        ttl: int | None = None,
    ) -> str | None:
        """Store (or replace) a session payload.

        Args:
            session_id: Session identifier.
            data: JSON-serializable session payload.
            ttl: Lifetime in seconds (default 24 hours).

        Returns:
            "OK" on success, None on failure.
        """
        return await self._cache.set_json(
            session_key(session_id), data, ttl=ttl or self._session_ttl
        )

    async def get_session(self, session_id: str) -> dict[str, Any] | None:
        """Session payload; None when absent, expired or on failure."""
        return await self._cache.get_json(session_key(session_id))

    async def delete_session(self, session_id: str) -> int:
        """Remove a session. Returns records removed (0 or 1)."""
        return await self._cache.delete(session_key(session_id))

    async def extend_session(self, session_id: str, ttl: int | None = None) -> bool:
        """Restart the session's lifetime.

        Returns:
            True when the session exists and its expiry was reset.
        """
        extended = await self._cache.expire(
            session_key(session_id), ttl or self._session_ttl
        )
        return extended == 1


class SocketConnectionService:
    """Tracks the live socket connection of each user (one per user)."""

    def __init__(self, cache: CacheService, logger: LoggerProtocol) -> None:
        self._cache = cache
        self._logger = logger

    async def add_connection(self, user_id: str | int, socket_id: str) -> str | None:
        """Record the user's socket, replacing any previous one.

        Returns:
            "OK" on success, None on failure.
        """
        record = {"socket_id": socket_id, "connected_at": int(time.time() * 1000)}
        reply = await self._cache.set_json(socket_key(user_id), record)
        if reply is None:
            self._logger.warning(
                "Failed to record socket connection", user_id=str(user_id)
            )
        return reply

    async def remove_connection(self, user_id: str | int) -> int:
        """Forget the user's socket. Returns records removed (0 or 1)."""
        return await self._cache.delete(socket_key(user_id))

    async def get_connection(self, user_id: str | int) -> dict[str, Any] | None:
        """The user's socket record (``socket_id``, ``connected_at`` in epoch ms)."""
        return await self._cache.get_json(socket_key(user_id))
