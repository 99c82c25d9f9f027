"""Result types for railway-oriented programming.

Every step of request handling (query parsing, body decoding, authentication,
command validation and service calls) reports failure by returning a value
instead of raising. Errors stay explicit and testable, and nothing but
routing exceptions ever crosses the transport boundary.

Usage:
    def parse_limit(raw: str) -> Result[int, ValidationError]:
        if not raw.isdigit():
            return Failure(error=ValidationError(...))
        return Success(value=int(raw))

    match parse_limit("10"):
        case Success(value=limit):
            ...
        case Failure(error=error):
            ...
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
Result = Success[T] | Failure[E]
