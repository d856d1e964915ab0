"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from mockmate_cache.domain.protocols import CacheClientProtocol, LoggerProtocol
"""

from mockmate_cache.domain.protocols.cache_client_protocol import (
    CacheClientProtocol,
    InfoValue,
)
from mockmate_cache.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "CacheClientProtocol",
    "InfoValue",
    "LoggerProtocol",
]
