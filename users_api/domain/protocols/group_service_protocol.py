"""GroupServiceProtocol: group membership changes."""

from typing import Protocol

from users_api.core.errors import DomainError
from users_api.core.result import Result
from users_api.domain.entities import Session


class GroupServiceProtocol(Protocol):
    """Group membership service.

    ``member_kind`` is ``"users"`` or ``"groups"``; ``relation`` is the
    relation the members hold on the group (``parent_group`` for groups).
    """

    async def assign(
        self,
        session: Session,
        group_id: str,
        relation: str,
        member_kind: str,
        member_ids: list[str],
    ) -> Result[None, DomainError]:
        """Add members to a group."""
        ...

    async def unassign(
        self,
        session: Session,
        group_id: str,
        relation: str,
        member_kind: str,
        member_ids: list[str],
    ) -> Result[None, DomainError]:
        """Remove members from a group."""
        ...
