"""Unit tests for RequestDispatcher step ordering.

parse → authenticate → validate → invoke → emit; the first failing step
decides the response and later steps never run.
"""

import json
from dataclasses import dataclass
from unittest.mock import AsyncMock, Mock

import pytest
from starlette.requests import Request

from users_api.core.enums import ErrorCode
from users_api.core.errors import (
    AuthenticationError,
    InternalError,
    NotFoundError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from users_api.core.result import Failure, Result, Success
from users_api.domain.entities import Session
from users_api.presentation.routers.api.dispatcher import (
    RequestDispatcher,
    empty_response,
)
from users_api.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatorGateway,
)
from users_api.presentation.routers.api.routes import AuthLevel


@dataclass(frozen=True, kw_only=True)
class Command:
    valid: bool = True
    token: str = ""

    def validate(self) -> Result[None, ValidationError]:
        if self.valid:
            return Success(value=None)
        return Failure(
            error=ValidationError(code=ErrorCode.MISSING_ID, message="missing entity id")
        )


def _request(
    authorization: str | None = "Bearer good",
    auth_level: AuthLevel | None = None,
) -> Request:
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode()))
    request = Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/users/",
            "headers": headers,
            "query_string": b"",
        }
    )
    if auth_level is not None:
        request.state.auth_level = auth_level
    return request


@pytest.fixture
def authenticator():
    mock = AsyncMock()
    mock.authenticate.return_value = Success(
        value=Session(user_id="u1", domain_id="d0")
    )
    return mock


@pytest.fixture
def dispatcher(authenticator):
    return RequestDispatcher(
        gateway=AuthenticatorGateway(authenticator=authenticator),
        logger=Mock(),
    )


@pytest.mark.unit
class TestDispatchOrder:
    """Test that steps run in order and stop at the first failure."""

    async def test_parse_failure_precedes_authentication(
        self, dispatcher, authenticator
    ):
        """Should answer 415 even without a bearer token."""
        # Arrange
        invoke = AsyncMock()
        parsed = Failure(
            error=UnsupportedMediaTypeError(
                code=ErrorCode.UNSUPPORTED_MEDIA_TYPE, message="unsupported"
            )
        )

        # Act
        response = await dispatcher.dispatch(
            _request(authorization=None),
            operation="test",
            parsed=parsed,
            invoke=invoke,
            render=lambda _: empty_response(200),
        )

        # Assert
        assert response.status_code == 415
        authenticator.authenticate.assert_not_called()
        invoke.assert_not_called()

    async def test_authentication_precedes_validation(self, dispatcher):
        """Should answer 401 bearer_token before validating the command."""
        invoke = AsyncMock()

        response = await dispatcher.dispatch(
            _request(authorization=None),
            operation="test",
            parsed=Success(value=Command(valid=False)),
            invoke=invoke,
            render=lambda _: empty_response(200),
        )

        assert response.status_code == 401
        assert json.loads(response.body)["error"] == "bearer_token"
        invoke.assert_not_called()

    async def test_validation_precedes_invoke(self, dispatcher):
        """Should answer 400 without calling the service."""
        invoke = AsyncMock()

        response = await dispatcher.dispatch(
            _request(),
            operation="test",
            parsed=Success(value=Command(valid=False)),
            invoke=invoke,
            render=lambda _: empty_response(200),
        )

        assert response.status_code == 400
        assert json.loads(response.body)["error"] == "missing_id"
        invoke.assert_not_called()

    async def test_service_failure_is_mapped(self, dispatcher):
        """Should map a service failure through the error mapper."""
        invoke = AsyncMock(
            return_value=Failure(
                error=NotFoundError(
                    code=ErrorCode.RESOURCE_NOT_FOUND,
                    message="user not found",
                    resource_type="user",
                    resource_id="u2",
                )
            )
        )

        response = await dispatcher.dispatch(
            _request(),
            operation="test",
            parsed=Success(value=Command()),
            invoke=invoke,
            render=lambda _: empty_response(200),
        )

        assert response.status_code == 404

    async def test_internal_failure_logged_as_error(self, dispatcher):
        """Should log 5xx failures at error level."""
        invoke = AsyncMock(
            return_value=Failure(
                error=InternalError(code=ErrorCode.INTERNAL_ERROR, message="db down")
            )
        )

        response = await dispatcher.dispatch(
            _request(),
            operation="test",
            parsed=Success(value=Command()),
            invoke=invoke,
            render=lambda _: empty_response(200),
        )

        assert response.status_code == 500
        dispatcher.logger.bind.return_value.error.assert_called_once()


@pytest.mark.unit
class TestDispatchSession:
    """Test how the session reaches the service."""

    async def test_success_renders_value(self, dispatcher):
        """Should pass the session and command to invoke and render its value."""
        # Arrange
        invoke = AsyncMock(return_value=Success(value="rendered"))
        command = Command()

        # Act
        response = await dispatcher.dispatch(
            _request(),
            operation="test",
            parsed=Success(value=command),
            invoke=invoke,
            render=lambda value: empty_response(201 if value == "rendered" else 500),
        )

        # Assert
        assert response.status_code == 201
        session, received = invoke.await_args.args
        assert session == Session(user_id="u1", domain_id="d0")
        assert received is command

    async def test_domain_rescoping(self, dispatcher):
        """Should re-scope the session to the path domain."""
        invoke = AsyncMock(return_value=Success(value=None))

        await dispatcher.dispatch(
            _request(),
            operation="test",
            parsed=Success(value=Command()),
            invoke=invoke,
            render=lambda _: empty_response(200),
            domain_id="d1",
        )

        session = invoke.await_args.args[0]
        assert session.domain_id == "d1"
        assert session.domain_user_id == "d1_u1"

    async def test_token_from_command(self, dispatcher, authenticator):
        """Should authenticate the command's token on body-token routes."""
        invoke = AsyncMock(return_value=Success(value=None))

        await dispatcher.dispatch(
            _request(authorization="Bearer header", auth_level=AuthLevel.BODY_TOKEN),
            operation="test",
            parsed=Success(value=Command(token="reset-token")),
            invoke=invoke,
            render=lambda _: empty_response(201),
            token=lambda command: command.token,
        )

        authenticator.authenticate.assert_awaited_once_with("reset-token")

    async def test_unauthenticated_endpoint(self, dispatcher, authenticator):
        """Should skip authentication and pass no session."""
        invoke = AsyncMock(return_value=Success(value=None))

        await dispatcher.dispatch(
            _request(authorization=None, auth_level=AuthLevel.PUBLIC),
            operation="test",
            parsed=Success(value=Command()),
            invoke=invoke,
            render=lambda _: empty_response(201),
        )

        authenticator.authenticate.assert_not_called()
        assert invoke.await_args.args[0] is None

    async def test_bearer_route_ignores_token_extractor(
        self, dispatcher, authenticator
    ):
        """Should read the header on bearer routes even with a token extractor."""
        await dispatcher.dispatch(
            _request(authorization="Bearer good", auth_level=AuthLevel.BEARER),
            operation="test",
            parsed=Success(value=Command(token="body-token")),
            invoke=AsyncMock(return_value=Success(value=None)),
            render=lambda _: empty_response(200),
            token=lambda command: command.token,
        )

        authenticator.authenticate.assert_awaited_once_with("good")

    async def test_unrecorded_level_requires_bearer(self, dispatcher, authenticator):
        """Should authenticate the header when no auth level was recorded."""
        response = await dispatcher.dispatch(
            _request(authorization=None),
            operation="test",
            parsed=Success(value=Command()),
            invoke=AsyncMock(),
            render=lambda _: empty_response(200),
        )

        assert response.status_code == 401
        assert json.loads(response.body)["error"] == "bearer_token"

    async def test_authenticator_failure_passes_through(
        self, dispatcher, authenticator
    ):
        """Should answer 401 with the authenticator's code."""
        authenticator.authenticate.return_value = Failure(
            error=AuthenticationError(
                code=ErrorCode.AUTHENTICATION_FAILED, message="expired"
            )
        )

        response = await dispatcher.dispatch(
            _request(),
            operation="test",
            parsed=Success(value=Command()),
            invoke=AsyncMock(),
            render=lambda _: empty_response(200),
        )

        assert response.status_code == 401
        assert json.loads(response.body)["error"] == "authentication_failed"
