"""Client (user) entity and page snapshots.

These are the shapes the users service hands back. Persistence and password
hashing live behind the service; the secret is never rendered in responses.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from users_api.domain.enums import ClientRole, ClientStatus


@dataclass
class Credentials:
    """Login credentials of a client.

    Attributes:
        identity: Login identity, usually an email address.
        secret: Plaintext secret on the way in; never echoed back.
    """

    identity: str = ""
    secret: str = ""


@dataclass
class Client:
    """A registered client (user).

    Attributes:
        id: Client id (UUID string). Empty until the service assigns one.
        name: Display name.
        tags: Free-form tags.
        domain_id: Owning domain, if any.
        credentials: Identity and secret.
        metadata: Arbitrary JSON object.
        status: Lifecycle status.
        role: Platform role.
        created_at: Creation time, set by the service.
        updated_at: Last update time, set by the service.
        updated_by: Id of the client that made the last update.
        permissions: Permissions of the caller on this client, when requested.
    """

    id: str = ""
    name: str = ""
    tags: list[str] = field(default_factory=list)
    domain_id: str = ""
    credentials: Credentials = field(default_factory=Credentials)
    metadata: dict[str, Any] = field(default_factory=dict)
    status: ClientStatus = ClientStatus.ENABLED
    role: ClientRole = ClientRole.USER
    created_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: str = ""
    permissions: list[str] = field(default_factory=list)


@dataclass
class ClientsPage:
    """One page of clients.

    Attributes:
        total: Number of clients matching the query.
        offset: Offset of the first client in this page.
        limit: Requested page size.
        clients: Clients in this page.
    """

    total: int
    offset: int
    limit: int
    clients: list[Client] = field(default_factory=list)
