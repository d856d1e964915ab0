"""Result types for railway-oriented programming.

Cache client operations can fail without that failure being exceptional for
the caller. Returning a Result keeps "key absent" (``Success(None)``) and
"store unreachable" (``Failure(CacheError)``) apart.

Usage:
    result = await client.get("refresh_token:42")
    match result:
        case Success(value=None):
            ...  # miss
        case Success(value=token):
            ...  # hit
        case Failure(error=err):
            ...  # store error
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
