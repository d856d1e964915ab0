"""Application environment types.

Only PRODUCTION changes cache behavior: it disables the in-memory fallback
used when Redis cannot be reached at startup.
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
