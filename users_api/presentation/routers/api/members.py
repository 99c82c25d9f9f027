"""Member listing handlers.

Endpoints:
    GET /{domain_id}/groups/{group_id}/users      - Members of a group
    GET /{domain_id}/channels/{channel_id}/users  - Members of a channel
    GET /{domain_id}/things/{thing_id}/users      - Members of a thing
    GET /{domain_id}/users                        - Members of a domain

All four share the users service's ``list_members`` operation, told apart
by MemberScope. The session is re-scoped to the path domain before the
service is called.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.responses import Response

from users_api.application.queries import ListMembers
from users_api.core.container import UsersService
from users_api.domain.entities import ClientsPage
from users_api.domain.enums import MemberScope
from users_api.presentation.routers.api.dispatcher import (
    RequestDispatcher,
    get_request_dispatcher,
    model_response,
)
from users_api.presentation.routers.api.request.query_parser import (
    MEMBERS_DUPLICATE_POLICY,
    parse_query_command,
)
from users_api.schemas.client_schemas import ClientsPageResponse

Dispatcher = Annotated[RequestDispatcher, Depends(get_request_dispatcher)]


def _page_response(page: ClientsPage) -> Response:
    return model_response(ClientsPageResponse.from_entity(page))


async def _list_members(
    request: Request,
    dispatcher: RequestDispatcher,
    service: UsersService,
    *,
    domain_id: str,
    scope: MemberScope,
    scope_id: str,
) -> Response:
    parsed = parse_query_command(
        request,
        lambda page: ListMembers(
            domain_id=domain_id, scope=scope, scope_id=scope_id, page=page
        ),
        policy=MEMBERS_DUPLICATE_POLICY,
    )
    return await dispatcher.dispatch(
        request,
        operation=f"list_{scope.value}_members",
        parsed=parsed,
        invoke=lambda session, query: service.list_members(
            session, query.scope, query.scope_id, query.page
        ),
        render=_page_response,
        domain_id=domain_id,
    )


async def list_group_members(
    request: Request,
    domain_id: str,
    group_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """GET /{domain_id}/groups/{group_id}/users → 200 OK"""
    return await _list_members(
        request,
        dispatcher,
        service,
        domain_id=domain_id,
        scope=MemberScope.GROUPS,
        scope_id=group_id,
    )


async def list_channel_members(
    request: Request,
    domain_id: str,
    channel_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """GET /{domain_id}/channels/{channel_id}/users → 200 OK"""
    return await _list_members(
        request,
        dispatcher,
        service,
        domain_id=domain_id,
        scope=MemberScope.CHANNELS,
        scope_id=channel_id,
    )


async def list_thing_members(
    request: Request,
    domain_id: str,
    thing_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """GET /{domain_id}/things/{thing_id}/users → 200 OK"""
    return await _list_members(
        request,
        dispatcher,
        service,
        domain_id=domain_id,
        scope=MemberScope.THINGS,
        scope_id=thing_id,
    )


async def list_domain_members(
    request: Request,
    domain_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """List members of a domain.

    GET /{domain_id}/users → 200 OK

    The domain is both the session scope and the listed entity.
    """
    return await _list_members(
        request,
        dispatcher,
        service,
        domain_id=domain_id,
        scope=MemberScope.DOMAINS,
        scope_id=domain_id,
    )
