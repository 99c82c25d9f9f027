"""Error mapper: domain errors to HTTP status and error body.

The error class decides the status (most specific class first); errors that
arrive as a bare DomainError from a collaborator are mapped by code. Anything
unrecognized is a 500.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

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
from users_api.presentation.routers.api.errors.error_response import ErrorResponse

# Checked in order, so subclasses come before their bases.
_STATUS_BY_TYPE: tuple[tuple[type[DomainError], int], ...] = (
    (UnsupportedMediaTypeError, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_QUERY_PARAMS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MALFORMED_ENTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NAME_TOO_LONG: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_IDENTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_HOST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_RELATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_LIST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_PASS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_SEARCH_QUERY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.LEN_SEARCH_QUERY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATUS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ROLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.BEARER_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AUTHENTICATION_FAILED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AUTHORIZATION_FAILED: status.HTTP_403_FORBIDDEN,
    ErrorCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
    ErrorCode.RESOURCE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.UNSUPPORTED_MEDIA_TYPE: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.SERVICE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class ErrorResponseBuilder:
    """Build error responses from domain errors.

    Example:
        >>> error = ValidationError(
        ...     code=ErrorCode.MISSING_ID,
        ...     message="missing entity id",
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        400
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None = None,
    ) -> JSONResponse:
        """Convert a DomainError to a JSON error response.

        Args:
            error: Error produced by any dispatch step or collaborator
            request: FastAPI Request object (for the instance path)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with ErrorResponse content and the mapped status
        """
        status_code = ErrorResponseBuilder.get_status_code(error)
        body = ErrorResponse(
            error=error.code.value,
            message=error.message,
            instance=str(request.url.path),
            trace_id=trace_id,
        )
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map an error to its HTTP status code.

        Args:
            error: Domain error

        Returns:
            HTTP status code (400-599)

        Example:
            >>> ErrorResponseBuilder.get_status_code(
            ...     AuthenticationError(code=ErrorCode.BEARER_TOKEN, message="")
            ... )
            401
        """
        for error_type, status_code in _STATUS_BY_TYPE:
            if isinstance(error, error_type):
                return status_code
        return _STATUS_BY_CODE.get(
            error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
