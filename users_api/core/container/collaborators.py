"""Request-scoped access to the external collaborators.

The users service, group service and authenticator are wired once by
``create_app`` onto ``app.state``; these FastAPI dependencies hand them to
route handlers.
"""

import re
from typing import Annotated

from fastapi import Depends, Request

from users_api.domain.protocols import (
    AuthenticatorProtocol,
    GroupServiceProtocol,
    UsersServiceProtocol,
)


def get_users_service(request: Request) -> UsersServiceProtocol:
    """Return the users service configured for this app."""
    return request.app.state.users_service


def get_group_service(request: Request) -> GroupServiceProtocol:
    """Return the group service configured for this app."""
    return request.app.state.group_service


def get_authenticator(request: Request) -> AuthenticatorProtocol:
    """Return the authenticator configured for this app."""
    return request.app.state.authenticator


def get_password_pattern(request: Request) -> re.Pattern[str]:
    """Return the compiled password policy configured for this app."""
    return request.app.state.password_pattern


def get_allow_self_register(request: Request) -> bool:
    """Return whether self registration is allowed for this app."""
    return request.app.state.allow_self_register


# Annotated aliases for route handler signatures
UsersService = Annotated[UsersServiceProtocol, Depends(get_users_service)]
GroupService = Annotated[GroupServiceProtocol, Depends(get_group_service)]
PasswordPattern = Annotated[re.Pattern[str], Depends(get_password_pattern)]
AllowSelfRegister = Annotated[bool, Depends(get_allow_self_register)]
