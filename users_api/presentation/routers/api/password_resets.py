"""Password resets resource handlers.

Endpoints:
    POST /password/reset-request  - Email a reset link
    PUT  /password/reset          - Set a new password with a reset token

Neither endpoint uses the Authorization header. The reset request runs
before any session exists; the reset authenticates the token carried in
its body.
"""

from typing import Annotated

from fastapi import Depends, Request, status
from fastapi.responses import Response

from users_api.application.commands import ResetSecret, ResetSecretRequest
from users_api.core.container import PasswordPattern, UsersService
from users_api.presentation.routers.api.dispatcher import (
    RequestDispatcher,
    get_request_dispatcher,
    model_response,
)
from users_api.presentation.routers.api.request.request_decoder import (
    decode_command,
)
from users_api.schemas.password_schemas import (
    PasswordResetBody,
    PasswordResetMessageResponse,
    PasswordResetRequestBody,
)

Dispatcher = Annotated[RequestDispatcher, Depends(get_request_dispatcher)]

RESET_REQUEST_SENT_MESSAGE = "Email with reset link is sent"
PASSWORD_RESET_MESSAGE = "Password reset successfully"


def _message_response(message: str) -> Response:
    return model_response(
        PasswordResetMessageResponse(msg=message),
        status_code=status.HTTP_201_CREATED,
    )


async def request_password_reset(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Request a password reset link.

    POST /password/reset-request → 201 Created

    The reset page host is the request's Referer. The users service
    generates the reset token and sends the email; its errors (unknown
    identity, for instance) pass through unchanged.

    Args:
        request: FastAPI request object.
        dispatcher: Request dispatcher (injected).
        service: Users service (injected).

    Returns:
        PasswordResetMessageResponse on 201, error envelope otherwise.
    """
    host = request.headers.get("Referer", "")
    parsed = await decode_command(
        request,
        PasswordResetRequestBody,
        lambda body: ResetSecretRequest(email=body.email, host=host),
    )
    return await dispatcher.dispatch(
        request,
        operation="request_password_reset",
        parsed=parsed,
        invoke=lambda _, command: service.generate_reset_token(
            command.email, command.host
        ),
        render=lambda _: _message_response(RESET_REQUEST_SENT_MESSAGE),
    )


async def reset_password(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
    password_pattern: PasswordPattern,
) -> Response:
    """Set a new password.

    PUT /password/reset → 201 Created

    The body's ``token`` is authenticated in place of a bearer header, so an
    empty token is a 401 ``bearer_token``.
    """
    parsed = await decode_command(
        request,
        PasswordResetBody,
        lambda body: ResetSecret(
            token=body.token,
            password=body.password,
            confirm_password=body.confirm_password,
            password_pattern=password_pattern,
        ),
    )
    return await dispatcher.dispatch(
        request,
        operation="reset_password",
        parsed=parsed,
        invoke=lambda session, command: service.reset_secret(
            session, command.password
        ),
        render=lambda _: _message_response(PASSWORD_RESET_MESSAGE),
        token=lambda command: command.token,
    )
