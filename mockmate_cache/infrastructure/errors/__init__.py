"""Infrastructure errors package.

Usage:
    from mockmate_cache.infrastructure.errors import CacheError
"""

from mockmate_cache.infrastructure.errors.infrastructure_error import (
    CacheError,
    InfrastructureError,
)

__all__ = [
    "InfrastructureError",
    "CacheError",
]
