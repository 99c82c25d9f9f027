"""AuthenticatorProtocol: bearer token to Session exchange."""

from typing import Protocol

from users_api.core.errors import DomainError
from users_api.core.result import Result
from users_api.domain.entities import Session


class AuthenticatorProtocol(Protocol):
    """External authentication collaborator.

    Implementations receive a non-empty token and return the session it
    belongs to, or an AuthenticationError for invalid or expired tokens.
    """

    async def authenticate(self, token: str) -> Result[Session, DomainError]:
        """Resolve ``token`` into a Session."""
        ...
