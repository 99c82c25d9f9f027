"""Core errors package.

Usage:
    from users_api.core.errors import DomainError, ValidationError
"""

from users_api.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
    NotFoundError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from users_api.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "UnsupportedMediaTypeError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
]
