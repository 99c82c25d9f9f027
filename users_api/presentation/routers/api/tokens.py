"""Tokens resource handlers.

Endpoints:
    POST /users/tokens/issue    - Issue a token pair from credentials
    POST /users/tokens/refresh  - Refresh a token pair

Issuing runs before any session exists, so it is not authenticated. Refresh
authenticates the refresh token, which arrives as the bearer token.
"""

from typing import Annotated

from fastapi import Depends, Request, status
from fastapi.responses import Response

from users_api.application.commands import IssueToken, RefreshToken
from users_api.core.container import UsersService
from users_api.domain.entities import Token
from users_api.presentation.routers.api.dispatcher import (
    RequestDispatcher,
    get_request_dispatcher,
    model_response,
)
from users_api.presentation.routers.api.middleware.auth_dependencies import (
    bearer_token,
)
from users_api.presentation.routers.api.request.request_decoder import (
    decode_command,
)
from users_api.schemas.token_schemas import (
    TokenIssueRequest,
    TokenRefreshRequest,
    TokenResponse,
)

Dispatcher = Annotated[RequestDispatcher, Depends(get_request_dispatcher)]


def _token_response(token: Token) -> Response:
    return model_response(
        TokenResponse.from_entity(token),
        status_code=status.HTTP_201_CREATED,
    )


async def issue_token(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Issue access and refresh tokens.

    POST /users/tokens/issue → 201 Created

    Body: ``{"identity": ..., "secret": ..., "domainID": ...}``. A malformed
    body is rejected before the users service is called.

    Args:
        request: FastAPI request object.
        dispatcher: Request dispatcher (injected).
        service: Users service (injected).

    Returns:
        TokenResponse on 201, error envelope otherwise.
    """
    parsed = await decode_command(
        request,
        TokenIssueRequest,
        lambda body: IssueToken(
            identity=body.identity,
            secret=body.secret,
            domain_id=body.domain_id,
        ),
    )
    return await dispatcher.dispatch(
        request,
        operation="issue_token",
        parsed=parsed,
        invoke=lambda _, command: service.issue_token(
            command.identity, command.secret, command.domain_id
        ),
        render=_token_response,
    )


async def refresh_token(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Refresh a token pair.

    POST /users/tokens/refresh → 201 Created

    The refresh token is the bearer token; the body may name a domain to
    switch to.
    """
    parsed = await decode_command(
        request,
        TokenRefreshRequest,
        lambda body: RefreshToken(
            refresh_token=bearer_token(request),
            domain_id=body.domain_id,
        ),
    )
    return await dispatcher.dispatch(
        request,
        operation="refresh_token",
        parsed=parsed,
        invoke=lambda session, command: service.refresh_token(
            session, command.refresh_token, command.domain_id
        ),
        render=_token_response,
    )
