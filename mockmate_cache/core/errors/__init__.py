"""Core errors package.

Usage:
    from mockmate_cache.core.errors import DomainError
"""

from mockmate_cache.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
