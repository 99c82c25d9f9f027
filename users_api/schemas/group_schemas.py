"""Group membership request schemas.

Endpoints:
    POST /{domain_id}/groups/{group_id}/users/assign
    POST /{domain_id}/groups/{group_id}/users/unassign
    POST /{domain_id}/groups/{group_id}/groups/assign
    POST /{domain_id}/groups/{group_id}/groups/unassign
"""

from pydantic import Field

from users_api.schemas.common_schemas import RequestBody


class UsersRelationRequest(RequestBody):
    """Users to (un)assign with the relation they hold on the group."""

    relation: str = Field(default="", examples=["viewer"])
    user_ids: list[str] = Field(default_factory=list)


class GroupsRelationRequest(RequestBody):
    """Child groups to (un)assign."""

    group_ids: list[str] = Field(default_factory=list)
