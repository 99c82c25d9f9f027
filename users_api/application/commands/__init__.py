"""Application commands (write requests)."""

from users_api.application.commands.client_commands import (
    ChangeClientStatus,
    DeleteClient,
    RegisterClient,
    UpdateClient,
    UpdateClientIdentity,
    UpdateClientRole,
    UpdateClientSecret,
    UpdateClientTags,
)
from users_api.application.commands.group_commands import (
    GROUPS_MEMBER_KIND,
    PARENT_GROUP_RELATION,
    USERS_MEMBER_KIND,
    GroupRelation,
)
from users_api.application.commands.password_commands import (
    ResetSecret,
    ResetSecretRequest,
)
from users_api.application.commands.token_commands import IssueToken, RefreshToken

__all__ = [
    "ChangeClientStatus",
    "DeleteClient",
    "GROUPS_MEMBER_KIND",
    "GroupRelation",
    "IssueToken",
    "PARENT_GROUP_RELATION",
    "RefreshToken",
    "RegisterClient",
    "ResetSecret",
    "ResetSecretRequest",
    "UpdateClient",
    "UpdateClientIdentity",
    "UpdateClientRole",
    "UpdateClientSecret",
    "UpdateClientTags",
    "USERS_MEMBER_KIND",
]
