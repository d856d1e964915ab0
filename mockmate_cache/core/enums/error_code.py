"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Cache errors
    CACHE_OPERATION_FAILED = "cache_operation_failed"
    CACHE_UNAVAILABLE = "cache_unavailable"
    CACHE_NOT_CONNECTED = "cache_not_connected"
    CACHE_SERIALIZATION_FAILED = "cache_serialization_failed"
