"""Infrastructure enums package.

Usage:
    from mockmate_cache.infrastructure.enums import InfrastructureErrorCode
"""

from mockmate_cache.infrastructure.enums.infrastructure_error_code import (
    InfrastructureErrorCode,
)

__all__ = ["InfrastructureErrorCode"]
