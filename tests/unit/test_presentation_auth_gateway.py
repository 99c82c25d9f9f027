"""Unit tests for the authenticator gateway and bearer token extraction."""

from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request

from users_api.core.enums import ErrorCode
from users_api.core.errors import AuthenticationError
from users_api.core.result import Failure, Success
from users_api.domain.entities import Session
from users_api.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatorGateway,
    bearer_token,
)


def _request(authorization: str | None) -> Request:
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode()))
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/users/profile",
            "headers": headers,
            "query_string": b"",
        }
    )


@pytest.mark.unit
class TestBearerToken:
    """Test bearer_token extraction."""

    def test_extracts_token(self):
        """Should return the token after the Bearer prefix."""
        assert bearer_token(_request("Bearer abc.def")) == "abc.def"

    @pytest.mark.parametrize("header", [None, "", "Basic dXNlcjpwYXNz", "Bearer "])
    def test_missing_or_other_scheme(self, header):
        """Should return an empty string for missing or non-bearer headers."""
        assert bearer_token(_request(header)) == ""


@pytest.mark.unit
class TestAuthenticatorGateway:
    """Test AuthenticatorGateway.authenticate."""

    async def test_empty_token_short_circuits(self):
        """Should fail with BEARER_TOKEN without calling the authenticator."""
        # Arrange
        authenticator = AsyncMock()
        gateway = AuthenticatorGateway(authenticator=authenticator)

        # Act
        result = await gateway.authenticate("")

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.BEARER_TOKEN
        authenticator.authenticate.assert_not_called()

    async def test_delegates_valid_token(self):
        """Should return the authenticator's session."""
        # Arrange
        session = Session(user_id="u1", domain_id="d1")
        authenticator = AsyncMock()
        authenticator.authenticate.return_value = Success(value=session)
        gateway = AuthenticatorGateway(authenticator=authenticator)

        # Act
        result = await gateway.authenticate("token")

        # Assert
        assert result == Success(value=session)
        authenticator.authenticate.assert_awaited_once_with("token")

    async def test_passes_failure_through(self):
        """Should return the authenticator's failure unchanged."""
        failure = Failure(
            error=AuthenticationError(
                code=ErrorCode.AUTHENTICATION_FAILED, message="expired"
            )
        )
        authenticator = AsyncMock()
        authenticator.authenticate.return_value = failure
        gateway = AuthenticatorGateway(authenticator=authenticator)

        assert await gateway.authenticate("expired-token") is failure
