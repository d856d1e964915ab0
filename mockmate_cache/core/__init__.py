"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes
- Settings

The core module has NO dependencies on other application layers.
"""

from mockmate_cache.core.enums import Environment, ErrorCode
from mockmate_cache.core.errors import DomainError
from mockmate_cache.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "Environment",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
