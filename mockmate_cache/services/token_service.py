"""Admin token bookkeeping on top of CacheService.

Refresh tokens:
    One record per admin under ``refresh_token:{admin_id}``. A presented
    token is valid only if it equals the stored one exactly. Storing a new
    token replaces the old one (single active session per admin).

Access-token blacklist:
    ``blacklist:{token}`` marks a revoked access token until its TTL (the
    JWT lifetime) lapses. There is no early un-blacklist.

Login attempts:
    ``admin:login_attempts:{identifier}`` counts failed logins; the window
    starts at the first failure.

Outage behavior (inherited from CacheService neutral values):
    - is_refresh_token_valid -> False (fails closed: admins must log in again)
    - is_token_blacklisted -> False (fails open: revoked tokens pass until
      Redis is back)
"""

import hmac

from mockmate_cache.core.config import Settings
from mockmate_cache.domain.protocols import LoggerProtocol
from mockmate_cache.infrastructure.cache.cache_keys import (
    BLACKLIST_MARKER,
    blacklist_key,
    login_attempts_key,
    refresh_token_key,
)
from mockmate_cache.services.cache_service import CacheService


class AdminTokenService:
    """Refresh-token storage, access-token blacklist and login throttling.

    Attributes:
        _cache: Cache operations (non-throwing).
        _logger: Structured logger. Tokens are never logged.
        _refresh_ttl: Default refresh-token lifetime in seconds.
        _blacklist_ttl: Default blacklist lifetime in seconds.
        _login_attempts_ttl: Login attempt window in seconds.
    """

    def __init__(
        self,
        cache: CacheService,
        logger: LoggerProtocol,
        settings: Settings,
    ) -> None:
        """Initialize token service.

        Args:
            cache: Cache service shared with the rest of the process.
            logger: Structured logger.
            settings: Source of default TTLs.
        """
        self._cache = cache
        self._logger = logger
        self._refresh_ttl = settings.refresh_token_ttl_seconds
        self._blacklist_ttl = settings.blacklist_ttl_seconds
        self._login_attempts_ttl = settings.login_attempts_ttl_seconds

    async def store_refresh_token(
        self,
        admin_id: str | int,
        refresh_token: str,
        ttl: int | None = None,
    ) -> str | None:
        """Store (or replace) the refresh token for an admin.

        Args:
            admin_id: Admin identifier.
            refresh_token: Opaque refresh token.
            ttl: Lifetime in seconds (default 7 days).

        Returns:
            "OK" on success, None on failure.
        """
        reply = await self._cache.setex(
            refresh_token_key(admin_id), ttl or self._refresh_ttl, refresh_token
        )
        if reply is None:
            self._logger.warning("Failed to store refresh token", admin_id=str(admin_id))
        return reply

    async def is_refresh_token_valid(
        self, admin_id: str | int, refresh_token: str
    ) -> bool:
        """Check a presented refresh token against the stored one.

        Returns:
            True only when a record exists and matches exactly.
        """
        stored = await self._cache.get(refresh_token_key(admin_id))
        if stored is None or refresh_token is None:
            return False
        return hmac.compare_digest(stored.encode(), refresh_token.encode())

    async def remove_refresh_token(
        self, admin_id: str | int, refresh_token: str | None = None
    ) -> int:
        """Remove the admin's refresh-token record.

        The delete is keyed on admin_id only; ``refresh_token`` is accepted
        for call-site symmetry and is not compared with the stored value.

        Returns:
            Number of records removed (0 or 1); 0 on failure.
        """
        return await self._cache.delete(refresh_token_key(admin_id))

    async def remove_all_refresh_tokens(self, admin_id: str | int) -> bool:
        """Sign an admin out everywhere.

        An admin holds at most one refresh-token record, so this removes it
        and reports whether the cache was reachable.

        Returns:
            True when the store was reachable (whether or not a record
            existed), False when it was not.
        """
        if not self._cache.is_connected():
            return False
        await self._cache.delete(refresh_token_key(admin_id))
        return self._cache.is_connected()

    async def blacklist_token(self, token: str, ttl: int | None = None) -> str | None:
        """Mark an access token as revoked.

        Args:
            token: Raw access token.
            ttl: Lifetime in seconds (default 8 hours).

        Returns:
            "OK" on success, None on failure.
        """
        reply = await self._cache.setex(
            blacklist_key(token), ttl or self._blacklist_ttl, BLACKLIST_MARKER
        )
        if reply is None:
            self._logger.warning("Failed to blacklist access token")
        return reply

    async def is_token_blacklisted(self, token: str) -> bool:
        """Whether the access token has been revoked (key existence only)."""
        return await self._cache.exists(blacklist_key(token)) == 1

    async def increment_login_attempts(
        self, identifier: str, ttl: int | None = None
    ) -> int:
        """Count a failed login; the first failure opens the window.

        Args:
            identifier: Username, email or client IP.
            ttl: Window length in seconds (default 15 minutes).

        Returns:
            Attempts in the current window; 0 on failure.
        """
        key = login_attempts_key(identifier)
        attempts = await self._cache.increment(key)
        if attempts == 1:
            await self._cache.expire(key, ttl or self._login_attempts_ttl)
        return attempts

    async def get_login_attempts(self, identifier: str) -> int:
        """Failed logins in the current window; 0 when none or on failure."""
        raw = await self._cache.get(login_attempts_key(identifier))
        if raw is None:
            return 0
        try:
            return int(raw)
        except ValueError:
            self._logger.warning(
                "Ignoring non-numeric login attempt counter", identifier=identifier
            )
            return 0

    async def reset_login_attempts(self, identifier: str) -> int:
        """Clear the failed login counter (after a successful login)."""
        return await self._cache.delete(login_attempts_key(identifier))
