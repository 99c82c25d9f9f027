"""Token request/response schemas.

Endpoints:
    POST /users/tokens/issue    - Issue tokens from credentials
    POST /users/tokens/refresh  - Refresh tokens (refresh token as bearer)
"""

from pydantic import BaseModel, ConfigDict, Field

from users_api.domain.entities import Token
from users_api.schemas.common_schemas import RequestBody


class TokenIssueRequest(RequestBody):
    """Request schema for token issuance.

    The domain key is ``domainID`` on the wire; ``domain_id`` is accepted too.
    """

    identity: str = ""
    secret: str = ""
    domain_id: str = Field(default="", alias="domainID")

    model_config = ConfigDict(populate_by_name=True)


class TokenRefreshRequest(RequestBody):
    """Request schema for token refresh.

    The refresh token itself travels in the Authorization header.
    """

    domain_id: str = ""


class TokenResponse(BaseModel):
    """Issued token pair (201 Created)."""

    access_token: str
    refresh_token: str | None = None
    access_type: str | None = None

    @classmethod
    def from_entity(cls, token: Token) -> "TokenResponse":
        """Build the response from a Token entity."""
        return cls(
            access_token=token.access_token,
            refresh_token=token.refresh_token or None,
            access_type=token.access_type or None,
        )
