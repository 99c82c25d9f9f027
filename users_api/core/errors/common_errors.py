"""Common error classes used across all layers.

The class of an error selects its HTTP status (see ErrorResponseBuilder);
the code selects the short ``error`` string in the response body.

Error Types:
- ValidationError: Malformed, missing or out-of-range input
- UnsupportedMediaTypeError: Request body sent with a non-JSON content type
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicate identity, name)
- AuthenticationError: Missing or rejected credentials
- AuthorizationError: Authenticated but not permitted
- InternalError: Unclassified failure in a collaborator

Usage:
    from users_api.core.errors import ValidationError
    from users_api.core.enums import ErrorCode
    from users_api.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.MISSING_ID,
        message="Missing entity identifier",
        field="id",
    ))
"""

from dataclasses import dataclass

from users_api.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UnsupportedMediaTypeError(ValidationError):
    """Request body declared with a content type other than JSON.

    A validation failure that the transport reports as 415 instead of 400.
    """

    content_type: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (user, group, etc.).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate identity, name).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (identity, name, etc.).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (missing, invalid or expired token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        required_permission: Permission that was required.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Unclassified failure, reported as 500."""

    pass
