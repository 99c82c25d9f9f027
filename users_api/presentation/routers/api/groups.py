"""Group membership handlers.

Endpoints:
    POST /{domain_id}/groups/{group_id}/users/assign     - Add users
    POST /{domain_id}/groups/{group_id}/users/unassign   - Remove users
    POST /{domain_id}/groups/{group_id}/groups/assign    - Add child groups
    POST /{domain_id}/groups/{group_id}/groups/unassign  - Remove child groups

Users are (un)assigned with the relation named in the body; child groups
always use the ``parent_group`` relation.

A body without a Content-Type header is read as JSON; only a declared
non-JSON type is rejected with 415.
"""

from typing import Annotated

from fastapi import Depends, Request, status
from fastapi.responses import Response

from users_api.application.commands import (
    GROUPS_MEMBER_KIND,
    PARENT_GROUP_RELATION,
    USERS_MEMBER_KIND,
    GroupRelation,
)
from users_api.core.container import GroupService
from users_api.core.errors import ValidationError
from users_api.core.result import Result
from users_api.presentation.routers.api.dispatcher import (
    RequestDispatcher,
    empty_response,
    get_request_dispatcher,
)
from users_api.presentation.routers.api.request.request_decoder import (
    decode_command,
)
from users_api.schemas.group_schemas import GroupsRelationRequest, UsersRelationRequest

Dispatcher = Annotated[RequestDispatcher, Depends(get_request_dispatcher)]


async def _change_membership(
    request: Request,
    dispatcher: RequestDispatcher,
    service: GroupService,
    *,
    operation: str,
    parsed: Result[GroupRelation, ValidationError],
    assign: bool,
    domain_id: str,
) -> Response:
    success_status = status.HTTP_201_CREATED if assign else status.HTTP_204_NO_CONTENT
    change = service.assign if assign else service.unassign
    return await dispatcher.dispatch(
        request,
        operation=operation,
        parsed=parsed,
        invoke=lambda session, command: change(
            session,
            command.group_id,
            command.relation,
            command.member_kind,
            command.member_ids,
        ),
        render=lambda _: empty_response(success_status),
        domain_id=domain_id,
    )


async def _users_relation(
    request: Request, domain_id: str, group_id: str
) -> Result[GroupRelation, ValidationError]:
    return await decode_command(
        request,
        UsersRelationRequest,
        lambda body: GroupRelation(
            domain_id=domain_id,
            group_id=group_id,
            relation=body.relation,
            member_kind=USERS_MEMBER_KIND,
            member_ids=body.user_ids,
        ),
        require_content_type=False,
    )


async def _groups_relation(
    request: Request, domain_id: str, group_id: str
) -> Result[GroupRelation, ValidationError]:
    return await decode_command(
        request,
        GroupsRelationRequest,
        lambda body: GroupRelation(
            domain_id=domain_id,
            group_id=group_id,
            relation=PARENT_GROUP_RELATION,
            member_kind=GROUPS_MEMBER_KIND,
            member_ids=body.group_ids,
        ),
        require_content_type=False,
    )


async def assign_users(
    request: Request,
    domain_id: str,
    group_id: str,
    dispatcher: Dispatcher,
    service: GroupService,
) -> Response:
    """Add users to a group.

    POST /{domain_id}/groups/{group_id}/users/assign → 201 Created

    Body: ``{"relation": ..., "user_ids": [...]}``.
    """
    return await _change_membership(
        request,
        dispatcher,
        service,
        operation="assign_users",
        parsed=await _users_relation(request, domain_id, group_id),
        assign=True,
        domain_id=domain_id,
    )


async def unassign_users(
    request: Request,
    domain_id: str,
    group_id: str,
    dispatcher: Dispatcher,
    service: GroupService,
) -> Response:
    """POST /{domain_id}/groups/{group_id}/users/unassign → 204 No Content"""
    return await _change_membership(
        request,
        dispatcher,
        service,
        operation="unassign_users",
        parsed=await _users_relation(request, domain_id, group_id),
        assign=False,
        domain_id=domain_id,
    )


async def assign_groups(
    request: Request,
    domain_id: str,
    group_id: str,
    dispatcher: Dispatcher,
    service: GroupService,
) -> Response:
    """Add child groups to a group.

    POST /{domain_id}/groups/{group_id}/groups/assign → 201 Created

    Body: ``{"group_ids": [...]}``.
    """
    return await _change_membership(
        request,
        dispatcher,
        service,
        operation="assign_groups",
        parsed=await _groups_relation(request, domain_id, group_id),
        assign=True,
        domain_id=domain_id,
    )


async def unassign_groups(
    request: Request,
    domain_id: str,
    group_id: str,
    dispatcher: Dispatcher,
    service: GroupService,
) -> Response:
    """POST /{domain_id}/groups/{group_id}/groups/unassign → 204 No Content"""
    return await _change_membership(
        request,
        dispatcher,
        service,
        operation="unassign_groups",
        parsed=await _groups_relation(request, domain_id, group_id),
        assign=False,
        domain_id=domain_id,
    )
