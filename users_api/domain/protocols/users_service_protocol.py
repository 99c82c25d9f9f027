"""UsersServiceProtocol: the business operations behind every users route.

The service owns persistence, password hashing, token issuance and
authorization decisions. This API only validates requests, hands the
service a Session plus typed arguments, and maps what comes back.

Every method returns ``Result``; implementations report failures as
``Failure(error=DomainError)`` and never raise for expected outcomes.
"""

from typing import Protocol

from users_api.core.errors import DomainError
from users_api.core.result import Result
from users_api.domain.entities import Client, ClientsPage, Session, Token
from users_api.domain.enums import MemberScope
from users_api.domain.value_objects import PageQuery


class UsersServiceProtocol(Protocol):
    """Users domain service."""

    async def register_client(
        self, session: Session, client: Client, self_register: bool
    ) -> Result[Client, DomainError]:
        """Create a client.

        Args:
            session: Caller session.
            client: Client to create (id may be empty).
            self_register: Whether self registration is allowed.

        Returns:
            Result with the stored client.
        """
        ...

    async def view_client(
        self, session: Session, client_id: str
    ) -> Result[Client, DomainError]:
        """Fetch one client by id."""
        ...

    async def view_profile(self, session: Session) -> Result[Client, DomainError]:
        """Fetch the caller's own client."""
        ...

    async def list_clients(
        self, session: Session, page: PageQuery
    ) -> Result[ClientsPage, DomainError]:
        """List clients visible to the caller."""
        ...

    async def search_clients(
        self, session: Session, page: PageQuery
    ) -> Result[ClientsPage, DomainError]:
        """Search clients by name, id or identity."""
        ...

    async def update_client(
        self, session: Session, client: Client
    ) -> Result[Client, DomainError]:
        """Update name and metadata of ``client.id``."""
        ...

    async def update_client_tags(
        self, session: Session, client: Client
    ) -> Result[Client, DomainError]:
        """Replace the tags of ``client.id``."""
        ...

    async def update_client_identity(
        self, session: Session, client_id: str, identity: str
    ) -> Result[Client, DomainError]:
        """Change the login identity of a client."""
        ...

    async def update_client_secret(
        self, session: Session, old_secret: str, new_secret: str
    ) -> Result[Client, DomainError]:
        """Change the caller's own secret."""
        ...

    async def update_client_role(
        self, session: Session, client: Client
    ) -> Result[Client, DomainError]:
        """Change the platform role of ``client.id``."""
        ...

    async def enable_client(
        self, session: Session, client_id: str
    ) -> Result[Client, DomainError]:
        """Set a client's status to enabled."""
        ...

    async def disable_client(
        self, session: Session, client_id: str
    ) -> Result[Client, DomainError]:
        """Set a client's status to disabled."""
        ...

    async def delete_client(
        self, session: Session, client_id: str
    ) -> Result[None, DomainError]:
        """Delete a client."""
        ...

    async def generate_reset_token(
        self, email: str, host: str
    ) -> Result[None, DomainError]:
        """Issue a password reset token and email it.

        Args:
            email: Identity of the client asking for a reset.
            host: Origin the reset link should point at.
        """
        ...

    async def send_password_reset(
        self, host: str, email: str, user: str, token: str
    ) -> Result[None, DomainError]:
        """Deliver a reset link to ``email``.

        Not called by any route: ``generate_reset_token`` calls it from
        inside the service once the token exists. It is part of the protocol
        so a service can be assembled from a separate mailer.
        """
        ...

    async def reset_secret(
        self, session: Session, secret: str
    ) -> Result[None, DomainError]:
        """Replace the secret of the client the reset token belongs to."""
        ...

    async def issue_token(
        self, identity: str, secret: str, domain_id: str
    ) -> Result[Token, DomainError]:
        """Exchange credentials for a token pair."""
        ...

    async def refresh_token(
        self, session: Session, refresh_token: str, domain_id: str
    ) -> Result[Token, DomainError]:
        """Exchange a refresh token for a new token pair."""
        ...

    async def list_members(
        self,
        session: Session,
        scope: MemberScope,
        scope_id: str,
        page: PageQuery,
    ) -> Result[ClientsPage, DomainError]:
        """List clients related to an entity.

        Args:
            session: Caller session, scoped to the path domain.
            scope: Kind of entity ``scope_id`` refers to.
            scope_id: Group, channel, thing or domain id.
            page: Filter and pagination.

        Returns:
            Result with the page of member clients.
        """
        ...
