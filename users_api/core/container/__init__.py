"""Container module - Centralized dependency injection.

- infrastructure: application-scoped singletons (logger, remote authenticator)
- collaborators: request-scoped FastAPI dependencies reading app.state

Usage:
    from users_api.core.container import get_logger, UsersService
"""

from users_api.core.container.collaborators import (
    AllowSelfRegister,
    GroupService,
    PasswordPattern,
    UsersService,
    get_allow_self_register,
    get_authenticator,
    get_group_service,
    get_password_pattern,
    get_users_service,
)
from users_api.core.container.infrastructure import (
    get_logger,
    get_remote_authenticator,
)

__all__ = [
    "AllowSelfRegister",
    "GroupService",
    "PasswordPattern",
    "UsersService",
    "get_allow_self_register",
    "get_authenticator",
    "get_group_service",
    "get_logger",
    "get_password_pattern",
    "get_remote_authenticator",
    "get_users_service",
]
