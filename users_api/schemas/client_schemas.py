"""Client request/response schemas.

Endpoints:
    POST   /users/                 - Register client
    GET    /users/{id}             - View client
    GET    /users/profile          - View own client
    GET    /users                  - List clients
    GET    /users/search           - Search clients
    PATCH  /users/{id}             - Update name and metadata
    PATCH  /users/{id}/tags        - Replace tags
    PATCH  /users/{id}/identity    - Change identity
    PATCH  /users/{id}/role        - Change role
    PATCH  /users/secret           - Change own secret
    POST   /users/{id}/enable      - Enable client
    POST   /users/{id}/disable     - Disable client

Request fields default to empty values so that a missing field is reported
by the command's ``validate()`` with a precise error code, not as a decoding
failure. A JSON ``null`` counts as missing (see RequestBody).
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from users_api.domain.entities import Client, ClientsPage
from users_api.schemas.common_schemas import RequestBody


# =============================================================================
# Requests
# =============================================================================


class CredentialsRequest(RequestBody):
    """Credentials part of a registration body."""

    identity: str = Field(default="", examples=["alice@example.com"])
    secret: str = Field(default="", examples=["12345678"])


class ClientCreateRequest(RequestBody):
    """Request schema for client registration.

    POST /users/
    Returns: 201 Created
    """

    id: str = Field(default="", description="Optional client id (UUID)")
    name: str = Field(default="", description="Display name")
    tags: list[str] = Field(default_factory=list)
    credentials: CredentialsRequest = Field(default_factory=CredentialsRequest)
    metadata: dict[str, Any] = Field(default_factory=dict)
    status: str = Field(default="enabled", examples=["enabled"])
    role: str = Field(default="user", examples=["user"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "alice",
                "credentials": {
                    "identity": "alice@example.com",
                    "secret": "12345678",
                },
                "tags": ["tag1"],
                "metadata": {"department": "sales"},
            }
        }
    )


class ClientUpdateRequest(RequestBody):
    """Request schema for name and metadata updates.

    PATCH /users/{id}
    """

    name: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)


class ClientTagsRequest(RequestBody):
    """PATCH /users/{id}/tags"""

    tags: list[str] = Field(default_factory=list)


class ClientIdentityRequest(RequestBody):
    """PATCH /users/{id}/identity"""

    identity: str = ""


class ClientSecretRequest(RequestBody):
    """PATCH /users/secret"""

    old_secret: str = ""
    new_secret: str = ""


class ClientRoleRequest(RequestBody):
    """PATCH /users/{id}/role"""

    role: str = ""


# =============================================================================
# Responses
# =============================================================================


class CredentialsResponse(BaseModel):
    """Credentials as rendered in responses; the secret is never included."""

    identity: str | None = None


class ClientResponse(BaseModel):
    """Client snapshot.

    Empty optional values are omitted from the JSON body.
    """

    id: str
    name: str | None = None
    tags: list[str] | None = None
    domain_id: str | None = None
    credentials: CredentialsResponse | None = None
    metadata: dict[str, Any] | None = None
    status: str
    role: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None
    permissions: list[str] | None = None

    @classmethod
    def from_entity(cls, client: Client) -> "ClientResponse":
        """Build the response from a Client entity.

        Args:
            client: Client returned by the users service.

        Returns:
            ClientResponse without the secret.
        """
        return cls(
            id=client.id,
            name=client.name or None,
            tags=list(client.tags) or None,
            domain_id=client.domain_id or None,
            credentials=(
                CredentialsResponse(identity=client.credentials.identity)
                if client.credentials.identity
                else None
            ),
            metadata=dict(client.metadata) or None,
            status=client.status.value,
            role=client.role.value,
            created_at=client.created_at,
            updated_at=client.updated_at,
            updated_by=client.updated_by or None,
            permissions=list(client.permissions) or None,
        )


class ClientsPageResponse(BaseModel):
    """Page of clients.

    GET /users, GET /users/search, GET /{domain_id}/.../users
    """

    total: int
    offset: int
    limit: int
    users: list[ClientResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, page: ClientsPage) -> "ClientsPageResponse":
        """Build the response from a ClientsPage entity."""
        return cls(
            total=page.total,
            offset=page.offset,
            limit=page.limit,
            users=[ClientResponse.from_entity(client) for client in page.clients],
        )
