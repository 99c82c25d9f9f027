"""Infrastructure dependency factories.

Application-scoped singletons for infrastructure services:
- Logging (console, JSON in testing/ci)
- Remote authenticator (httpx)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from users_api.core.config import settings
from users_api.core.enums import Environment

if TYPE_CHECKING:
    from users_api.domain.protocols import AuthenticatorProtocol, LoggerProtocol


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - testing/ci: ConsoleAdapter (JSON)
    - development/production: ConsoleAdapter (human-readable)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from users_api.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment in {Environment.TESTING, Environment.CI}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


# ============================================================================
# Authentication (Application-Scoped)
# ============================================================================


@lru_cache()
def get_remote_authenticator() -> "AuthenticatorProtocol":
    """Return the authenticator backed by the remote auth service.

    Returns:
        AuthenticatorProtocol: HTTP authenticator for settings.auth_service_url.
    """
    from users_api.infrastructure.authn.http_authenticator import HttpAuthenticator

    return HttpAuthenticator(
        base_url=settings.auth_service_url,
        timeout=settings.auth_request_timeout,
    )
