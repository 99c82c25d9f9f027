"""Base domain error class for railway-oriented programming.

DomainError is the base class for every error the service reports. Errors
flow through the request pipeline as data inside ``Failure``, never as
raised exceptions.

Usage:
    from users_api.core.errors import DomainError
    from users_api.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details, cause
"""

from dataclasses import dataclass

from users_api.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
        cause: Optional underlying error this one wraps.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None
    cause: "DomainError | None" = None

    def __str__(self) -> str:
        """String representation of error, including the wrapped cause."""
        if self.cause is not None:
            return f"{self.code.value}: {self.message}: {self.cause}"
        return f"{self.code.value}: {self.message}"
