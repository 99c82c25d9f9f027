"""Main FastAPI application entry point.

``create_app`` wires the external collaborators (users service, group
service, authenticator) onto ``app.state`` together with the request
pipeline: trace middleware, exception handlers and the registry-generated
routes.

Example:
    app = create_app(users_service=users, group_service=groups)
    # uvicorn serves ``app``
"""

import re
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_api.core.config import settings
from users_api.core.container import get_logger, get_remote_authenticator
from users_api.domain.protocols import (
    AuthenticatorProtocol,
    GroupServiceProtocol,
    UsersServiceProtocol,
)
from users_api.presentation.api.middleware.trace_middleware import TraceMiddleware
from users_api.presentation.routers.api.errors import register_exception_handlers
from users_api.presentation.routers.api.router import api_router
from users_api.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_started",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )

    yield

    logger.info("application_stopped", app_name=settings.app_name)


def create_app(
    *,
    users_service: UsersServiceProtocol,
    group_service: GroupServiceProtocol,
    authenticator: AuthenticatorProtocol | None = None,
    password_pattern: str | None = None,
    allow_self_register: bool | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        users_service: Users domain service.
        group_service: Group membership service.
        authenticator: Token authenticator. Defaults to the remote
            authentication service at ``settings.auth_service_url``.
        password_pattern: Password policy regex. Defaults to
            ``settings.password_pattern``.
        allow_self_register: Self-registration flag handed to the users
            service. Defaults to ``settings.allow_self_register``.

    Returns:
        Configured FastAPI application.

    Raises:
        re.error: If ``password_pattern`` is not a valid regular expression.
    """
    app = FastAPI(
        title=settings.app_name,
        description="Users service HTTP API",
        version=settings.app_version,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.users_service = users_service
    app.state.group_service = group_service
    app.state.authenticator = (
        authenticator if authenticator is not None else get_remote_authenticator()
    )
    app.state.password_pattern = re.compile(
        password_pattern if password_pattern is not None else settings.password_pattern
    )
    app.state.allow_self_register = (
        allow_self_register
        if allow_self_register is not None
        else settings.allow_self_register
    )

    # Wire trace middleware (request correlation)
    app.add_middleware(TraceMiddleware)

    # Register global exception handlers (routing errors share the error body)
    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(api_router)

    return app
