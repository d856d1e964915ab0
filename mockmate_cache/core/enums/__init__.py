"""Core enums package.

Usage:
    from mockmate_cache.core.enums import ErrorCode, Environment
"""

from mockmate_cache.core.enums.environment import Environment
from mockmate_cache.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
