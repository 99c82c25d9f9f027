"""Request dispatcher.

Runs one request through its steps, strictly in order, stopping at the first
failure and answering with the mapped error:

    1. parse         query/body already decoded by the handler
    2. authenticate  credential chosen by the route's registry AuthLevel:
                     bearer header, a token carried in the command, or
                     none for pre-session endpoints
    3. validate      command.validate()
    4. invoke        the users or group service
    5. emit          render the service result

Handlers stay declarative:

    return await dispatcher.dispatch(
        request,
        operation="view_client",
        parsed=Success(value=ViewClient(client_id=client_id)),
        invoke=lambda session, query: service.view_client(session, query.client_id),
        render=lambda client: model_response(ClientResponse.from_entity(client)),
    )
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated, Any, Protocol, TypeVar

from fastapi import Depends, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from users_api.core.container import get_authenticator, get_logger
from users_api.core.errors import DomainError, ValidationError
from users_api.core.result import Failure, Result, Success
from users_api.domain.entities import Session
from users_api.domain.protocols import AuthenticatorProtocol, LoggerProtocol
from users_api.presentation.api.middleware.trace_middleware import get_trace_id
from users_api.presentation.routers.api.errors import ErrorResponseBuilder
from users_api.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatorGateway,
    bearer_token,
)
from users_api.presentation.routers.api.routes.metadata import AuthLevel


class Validatable(Protocol):
    """Anything with a structural ``validate()``: commands and queries."""

    def validate(self) -> Result[None, ValidationError]: ...


CommandT = TypeVar("CommandT", bound=Validatable)


def model_response(
    model: BaseModel,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render a response schema as JSON, omitting unset optional fields."""
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def empty_response(status_code: int) -> Response:
    """Render a response without a body."""
    return Response(status_code=status_code)


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestDispatcher:
    """Per-request orchestration of parse, authenticate, validate, invoke, emit.

    Attributes:
        gateway: Authenticator gateway for step 2.
        logger: Structured logger.
    """

    gateway: AuthenticatorGateway
    logger: LoggerProtocol

    async def dispatch(
        self,
        request: Request,
        *,
        operation: str,
        parsed: Result[CommandT, DomainError],
        invoke: Callable[[Session | None, CommandT], Awaitable[Result[Any, DomainError]]],
        render: Callable[[Any], Response],
        token: Callable[[CommandT], str] | None = None,
        domain_id: str | None = None,
    ) -> Response:
        """Run one request through every step.

        Args:
            request: Incoming request.
            operation: Operation name for logs.
            parsed: Result of step 1 (query parsing and/or body decoding).
            invoke: Calls the external service with (session, command).
            render: Builds the success response from the service result.
            token: Takes the token from the command on BODY_TOKEN routes.
            domain_id: Re-scopes the session to this path domain.

        Returns:
            Success response, or the mapped error response of the first
            failing step.
        """
        log = self.logger.bind(operation=operation, trace_id=get_trace_id())

        match parsed:
            case Failure(error=error):
                return self._fail(request, log, "parse", error)
            case Success(value=command):
                pass

        session: Session | None = None
        level = _auth_level(request)
        if level != AuthLevel.PUBLIC:
            credential = (
                token(command)
                if level == AuthLevel.BODY_TOKEN and token is not None
                else bearer_token(request)
            )
            match await self.gateway.authenticate(credential):
                case Failure(error=error):
                    return self._fail(request, log, "authenticate", error)
                case Success(value=authenticated):
                    session = (
                        authenticated.in_domain(domain_id)
                        if domain_id is not None
                        else authenticated
                    )

        match command.validate():
            case Failure(error=error):
                return self._fail(request, log, "validate", error)

        match await invoke(session, command):
            case Failure(error=error):
                return self._fail(request, log, "invoke", error)
            case Success(value=value):
                log.debug(
                    "request_succeeded",
                    user_id=session.user_id if session else None,
                )
                return render(value)

    @staticmethod
    def _fail(
        request: Request,
        log: LoggerProtocol,
        step: str,
        error: DomainError,
    ) -> Response:
        response = ErrorResponseBuilder.from_domain_error(
            error=error,
            request=request,
            trace_id=get_trace_id(),
        )
        context = {
            "step": step,
            "error_code": error.code.value,
            "status_code": response.status_code,
        }
        if response.status_code >= 500:
            log.error("request_failed", error_message=error.message, **context)
        else:
            log.warning("request_failed", **context)
        return response


def _auth_level(request: Request) -> AuthLevel:
    """Auth level recorded by the route registry; BEARER when none was."""
    return getattr(request.state, "auth_level", AuthLevel.BEARER)


def get_request_dispatcher(
    authenticator: Annotated[AuthenticatorProtocol, Depends(get_authenticator)],
) -> RequestDispatcher:
    """FastAPI dependency building the dispatcher for one request."""
    return RequestDispatcher(
        gateway=AuthenticatorGateway(authenticator=authenticator),
        logger=get_logger(),
    )
