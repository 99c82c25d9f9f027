"""Client commands (write operations on users).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). ``validate()`` checks structure only; authorization and
existence are the users service's concern.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from users_api.core.constants import MAX_NAME_SIZE
from users_api.core.enums import ErrorCode
from users_api.core.errors import ValidationError
from users_api.core.result import Failure, Result, Success
from users_api.core.validation import (
    first_failure,
    validate_id,
    validate_max_length,
    validate_not_empty,
    validate_password,
    validate_uuid,
)
from users_api.domain.entities import Client, Credentials
from users_api.domain.enums import ClientRole, ClientStatus


def _validate_status(status: str) -> Result[str, ValidationError]:
    if status == ClientStatus.ALL.value or not ClientStatus.is_valid(status):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_STATUS,
                message=f"invalid client status: {status}",
                field="status",
            )
        )
    return Success(value=status)


def _validate_role(role: str) -> Result[str, ValidationError]:
    if not ClientRole.is_valid(role):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_ROLE,
                message=f"invalid client role: {role}",
                field="role",
            )
        )
    return Success(value=role)


@dataclass(frozen=True, kw_only=True)
class RegisterClient:
    """Register a new client.

    Attributes:
        id: Optional caller-chosen id; must be a UUID when given.
        name: Display name, at most MAX_NAME_SIZE characters.
        tags: Free-form tags.
        identity: Login identity (required).
        secret: Plaintext secret (required, must match the password policy).
        metadata: Arbitrary JSON object.
        status: Initial status; the ``all`` wildcard is rejected.
        role: Platform role.
        password_pattern: Compiled password policy.

    Example:
        >>> command = RegisterClient(
        ...     name="alice",
        ...     identity="alice@example.com",
        ...     secret="12345678",
        ...     password_pattern=re.compile(r"^.{8,}$"),
        ... )
        >>> command.validate()
        Success(value=None)
    """

    id: str = ""
    name: str = ""
    tags: list[str] = field(default_factory=list)
    identity: str = ""
    secret: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    status: str = ClientStatus.ENABLED.value
    role: str = ClientRole.USER.value
    password_pattern: re.Pattern[str]

    def validate(self) -> Result[None, ValidationError]:
        """Check the client body before it is handed to the service."""
        return first_failure(
            validate_uuid(self.id) if self.id else Success(value=self.id),
            validate_max_length(self.name, MAX_NAME_SIZE, "name"),
            validate_not_empty(
                self.identity, "identity", code=ErrorCode.MISSING_IDENTITY
            ),
            validate_password(self.secret, self.password_pattern, "secret"),
            _validate_status(self.status),
            _validate_role(self.role),
        )

    def to_client(self) -> Client:
        """Build the client entity the service stores."""
        return Client(
            id=self.id,
            name=self.name,
            tags=list(self.tags),
            credentials=Credentials(identity=self.identity, secret=self.secret),
            metadata=dict(self.metadata),
            status=ClientStatus(self.status),
            role=ClientRole(self.role),
        )


@dataclass(frozen=True, kw_only=True)
class UpdateClient:
    """Update name and metadata of a client.

    Attributes:
        client_id: Client to update (path).
        name: New display name.
        metadata: New metadata object.
    """

    client_id: str
    name: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def validate(self) -> Result[None, ValidationError]:
        """Require the id and bound the name length."""
        return first_failure(
            validate_id(self.client_id),
            validate_max_length(self.name, MAX_NAME_SIZE, "name"),
        )

    def to_client(self) -> Client:
        """Build the partial client entity carrying the changes."""
        return Client(id=self.client_id, name=self.name, metadata=dict(self.metadata))


@dataclass(frozen=True, kw_only=True)
class UpdateClientTags:
    """Replace the tags of a client."""

    client_id: str
    tags: list[str] = field(default_factory=list)

    def validate(self) -> Result[None, ValidationError]:
        """Require the id."""
        return first_failure(validate_id(self.client_id))

    def to_client(self) -> Client:
        """Build the partial client entity carrying the new tags."""
        return Client(id=self.client_id, tags=list(self.tags))


@dataclass(frozen=True, kw_only=True)
class UpdateClientIdentity:
    """Change the login identity of a client."""

    client_id: str
    identity: str = ""

    def validate(self) -> Result[None, ValidationError]:
        """Require the id and the new identity."""
        return first_failure(
            validate_id(self.client_id),
            validate_not_empty(
                self.identity, "identity", code=ErrorCode.MISSING_IDENTITY
            ),
        )


@dataclass(frozen=True, kw_only=True)
class UpdateClientSecret:
    """Change the caller's own secret.

    Attributes:
        old_secret: Current secret.
        new_secret: Replacement secret, must match the password policy.
        password_pattern: Compiled password policy.
    """

    old_secret: str = ""
    new_secret: str = ""
    password_pattern: re.Pattern[str]

    def validate(self) -> Result[None, ValidationError]:
        """Require both secrets and check the new one against the policy."""
        return first_failure(
            validate_not_empty(
                self.old_secret, "old_secret", code=ErrorCode.MISSING_PASS
            ),
            validate_not_empty(
                self.new_secret, "new_secret", code=ErrorCode.MISSING_PASS
            ),
            validate_password(self.new_secret, self.password_pattern, "new_secret"),
        )


@dataclass(frozen=True, kw_only=True)
class UpdateClientRole:
    """Change the platform role of a client."""

    client_id: str
    role: str = ""

    def validate(self) -> Result[None, ValidationError]:
        """Require the id and a known role."""
        return first_failure(validate_id(self.client_id), _validate_role(self.role))

    def to_client(self) -> Client:
        """Build the partial client entity carrying the new role."""
        return Client(id=self.client_id, role=ClientRole(self.role))


@dataclass(frozen=True, kw_only=True)
class ChangeClientStatus:
    """Enable or disable a client.

    Attributes:
        client_id: Client to change (path).
        enable: True to enable, False to disable.
    """

    client_id: str
    enable: bool

    def validate(self) -> Result[None, ValidationError]:
        """Require the id."""
        return first_failure(validate_id(self.client_id))


@dataclass(frozen=True, kw_only=True)
class DeleteClient:
    """Delete a client."""

    client_id: str

    def validate(self) -> Result[None, ValidationError]:
        """Require the id."""
        return first_failure(validate_id(self.client_id))
