"""Token commands."""

from dataclasses import dataclass

from users_api.core.enums import ErrorCode
from users_api.core.errors import ValidationError
from users_api.core.result import Result
from users_api.core.validation import first_failure, validate_not_empty


@dataclass(frozen=True, kw_only=True)
class IssueToken:
    """Exchange credentials for a token pair.

    Runs before any session exists, so nothing here is authenticated.

    Attributes:
        identity: Login identity.
        secret: Plaintext secret.
        domain_id: Domain the token is requested for.
    """

    identity: str = ""
    secret: str = ""
    domain_id: str = ""

    def validate(self) -> Result[None, ValidationError]:
        """Require identity, secret and domain."""
        return first_failure(
            validate_not_empty(
                self.identity, "identity", code=ErrorCode.MISSING_IDENTITY
            ),
            validate_not_empty(self.secret, "secret", code=ErrorCode.MISSING_PASS),
            validate_not_empty(self.domain_id, "domainID", code=ErrorCode.MISSING_ID),
        )


@dataclass(frozen=True, kw_only=True)
class RefreshToken:
    """Exchange a refresh token for a new token pair.

    The refresh token arrives as the bearer token and is authenticated by
    the gateway; an empty ``domain_id`` keeps the token's current domain.
    """

    refresh_token: str
    domain_id: str = ""

    def validate(self) -> Result[None, ValidationError]:
        """Nothing beyond authentication to check."""
        return first_failure()
