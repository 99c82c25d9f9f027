"""Authenticator gateway.

Exchanges a bearer token for a Session. The gateway owns the missing-token
contract (an empty token is rejected without calling the authenticator);
everything else is delegated to the configured AuthenticatorProtocol and its
failures pass through unchanged.

Role checks are NOT made here. The Session is handed to the users service,
which decides what the caller may do.

Usage:
    gateway = AuthenticatorGateway(authenticator=authenticator)
    match await gateway.authenticate(bearer_token(request)):
        case Success(value=session):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass

from fastapi import Request
from fastapi.security import HTTPBearer

from users_api.core.constants import BEARER_PREFIX
from users_api.core.enums import ErrorCode
from users_api.core.errors import AuthenticationError, DomainError
from users_api.core.result import Failure, Result
from users_api.domain.entities import Session
from users_api.domain.protocols import AuthenticatorProtocol

# Documents the bearer scheme in OpenAPI; enforcement is the gateway's job
bearer_scheme = HTTPBearer(auto_error=False)


def bearer_token(request: Request) -> str:
    """Extract the bearer token from the Authorization header.

    Args:
        request: Incoming request.

    Returns:
        The token, or an empty string when the header is missing or uses
        another scheme.
    """
    authorization = request.headers.get("Authorization", "")
    if not authorization.startswith(BEARER_PREFIX):
        return ""
    return authorization[len(BEARER_PREFIX) :].strip()


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatorGateway:
    """Token to Session exchange with the empty-token check in front.

    Attributes:
        authenticator: External authentication collaborator.
    """

    authenticator: AuthenticatorProtocol

    async def authenticate(self, token: str) -> Result[Session, DomainError]:
        """Authenticate a token.

        Args:
            token: Bearer token (may be empty).

        Returns:
            Success(Session) for a valid token.
            Failure(AuthenticationError BEARER_TOKEN) for an empty token.
            The authenticator's Failure otherwise.
        """
        if not token:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.BEARER_TOKEN,
                    message="missing or invalid bearer user token",
                )
            )
        return await self.authenticator.authenticate(token)
