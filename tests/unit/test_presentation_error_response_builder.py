"""Unit tests for the error mapper.

Tests cover:
- Status by error class (subclasses before bases)
- Status by code for bare DomainError values
- Error body shape and the WWW-Authenticate header on 401
"""

import json

import pytest
from starlette.requests import Request

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
from users_api.presentation.routers.api.errors import ErrorResponseBuilder


def _request(path: str = "/users") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "headers": [],
            "query_string": b"",
        }
    )


@pytest.mark.unit
class TestGetStatusCode:
    """Test ErrorResponseBuilder.get_status_code."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (ValidationError(code=ErrorCode.MISSING_ID, message=""), 400),
            (
                UnsupportedMediaTypeError(
                    code=ErrorCode.UNSUPPORTED_MEDIA_TYPE, message=""
                ),
                415,
            ),
            (AuthenticationError(code=ErrorCode.BEARER_TOKEN, message=""), 401),
            (AuthorizationError(code=ErrorCode.AUTHORIZATION_FAILED, message=""), 403),
            (
                NotFoundError(
                    code=ErrorCode.RESOURCE_NOT_FOUND,
                    message="",
                    resource_type="user",
                    resource_id="u1",
                ),
                404,
            ),
            (
                ConflictError(
                    code=ErrorCode.RESOURCE_CONFLICT,
                    message="",
                    resource_type="user",
                ),
                409,
            ),
            (InternalError(code=ErrorCode.INTERNAL_ERROR, message=""), 500),
            (InternalError(code=ErrorCode.SERVICE_UNAVAILABLE, message=""), 500),
        ],
    )
    def test_status_by_class(self, error, expected):
        """Should map each error class to its status."""
        assert ErrorResponseBuilder.get_status_code(error) == expected

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (ErrorCode.INVALID_QUERY_PARAMS, 400),
            (ErrorCode.BEARER_TOKEN, 401),
            (ErrorCode.AUTHORIZATION_FAILED, 403),
            (ErrorCode.RESOURCE_NOT_FOUND, 404),
            (ErrorCode.RESOURCE_CONFLICT, 409),
            (ErrorCode.SERVICE_UNAVAILABLE, 503),
        ],
    )
    def test_status_by_code_for_bare_domain_error(self, code, expected):
        """Should fall back to the code for bare DomainError values."""
        error = DomainError(code=code, message="")

        assert ErrorResponseBuilder.get_status_code(error) == expected


@pytest.mark.unit
class TestFromDomainError:
    """Test ErrorResponseBuilder.from_domain_error."""

    def test_body_shape(self):
        """Should render error, message, instance and trace_id."""
        # Arrange
        error = ValidationError(code=ErrorCode.INVALID_ROLE, message="invalid role")

        # Act
        response = ErrorResponseBuilder.from_domain_error(
            error=error, request=_request("/users/u1/role"), trace_id="trace-1"
        )

        # Assert
        assert response.status_code == 400
        assert json.loads(response.body) == {
            "error": "invalid_role",
            "message": "invalid role",
            "instance": "/users/u1/role",
            "trace_id": "trace-1",
        }
        assert "www-authenticate" not in response.headers

    def test_omits_missing_trace_id(self):
        """Should omit trace_id when there is none."""
        error = ValidationError(code=ErrorCode.MISSING_ID, message="missing entity id")

        response = ErrorResponseBuilder.from_domain_error(error=error, request=_request())

        assert "trace_id" not in json.loads(response.body)

    def test_unauthorized_has_challenge(self):
        """Should add WWW-Authenticate: Bearer on 401."""
        error = AuthenticationError(code=ErrorCode.BEARER_TOKEN, message="missing")

        response = ErrorResponseBuilder.from_domain_error(error=error, request=_request())

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
