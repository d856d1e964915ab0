"""Cache key builders for admin authentication and session records.

Key Patterns:
    - refresh_token:{admin_id} -> current refresh token for the admin
    - blacklist:{token} -> "blacklisted" marker for a revoked access token
    - admin:login_attempts:{identifier} -> failed login counter
    - session:{session_id} -> JSON session payload
    - socket:{user_id} -> JSON record of the user's live socket
"""

REFRESH_TOKEN_PREFIX = "refresh_token"
BLACKLIST_PREFIX = "blacklist"
LOGIN_ATTEMPTS_PREFIX = "admin:login_attempts"
SESSION_PREFIX = "session"
SOCKET_PREFIX = "socket"

BLACKLIST_MARKER = "blacklisted"

# Prefixes whose suffix is a credential and must not reach the logs.
_SENSITIVE_PREFIXES = (f"{BLACKLIST_PREFIX}:", f"{SESSION_PREFIX}:")


def refresh_token_key(admin_id: str | int) -> str:
    """Key holding the refresh token for an admin."""
    return f"{REFRESH_TOKEN_PREFIX}:{admin_id}"


def blacklist_key(token: str) -> str:
    """Key marking an access token as revoked."""
    return f"{BLACKLIST_PREFIX}:{token}"


def login_attempts_key(identifier: str) -> str:
    """Key counting failed login attempts for a username or IP."""
    return f"{LOGIN_ATTEMPTS_PREFIX}:{identifier}"


def session_key(session_id: str) -> str:
    """Key holding a session payload."""
    return f"{SESSION_PREFIX}:{session_id}"


def socket_key(user_id: str | int) -> str:
    """Key recording the live socket connection of a user."""
    return f"{SOCKET_PREFIX}:{user_id}"


def mask_key(key: str) -> str:
    """Return a log-safe form of a cache key.

    Keys embedding a token or session id keep the prefix and the first 8
    characters of the secret only.

    Args:
        key: Cache key.

    Returns:
        Key suitable for log context.
    """
    for prefix in _SENSITIVE_PREFIXES:
        if key.startswith(prefix):
            secret = key[len(prefix) :]
            return f"{prefix}{secret[:8]}..." if len(secret) > 8 else f"{prefix}***"
    return key
