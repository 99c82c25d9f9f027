"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Error classes and codes
- Settings, constants and the dependency container

The core module has NO dependencies on other application layers.
"""

from users_api.core.enums import ErrorCode
from users_api.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from users_api.core.result import Failure, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "DomainError",
    "ValidationError",
    "UnsupportedMediaTypeError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
]
