"""Clients resource handlers.

Endpoints:
    POST   /users/               - Register client
    GET    /users/profile        - View own client
    GET    /users/search         - Search clients
    GET    /users                - List clients
    GET    /users/{id}           - View client
    PATCH  /users/secret         - Change own secret
    PATCH  /users/{id}           - Update name and metadata
    PATCH  /users/{id}/tags      - Replace tags
    PATCH  /users/{id}/identity  - Change identity
    PATCH  /users/{id}/role      - Change role
    POST   /users/{id}/enable    - Enable client
    POST   /users/{id}/disable   - Disable client
    DELETE /users/{id}           - Delete client

Routes are registered from the route registry; every handler runs through
the RequestDispatcher.
"""

from typing import Annotated

from fastapi import Depends, Request, status
from fastapi.responses import Response

from users_api.application.commands import (
    ChangeClientStatus,
    DeleteClient,
    RegisterClient,
    UpdateClient,
    UpdateClientIdentity,
    UpdateClientRole,
    UpdateClientSecret,
    UpdateClientTags,
)
from users_api.application.queries import (
    ListClients,
    SearchClients,
    ViewClient,
    ViewProfile,
)
from users_api.core.container import AllowSelfRegister, PasswordPattern, UsersService
from users_api.core.result import Success
from users_api.domain.entities import Client, ClientsPage
from users_api.presentation.routers.api.dispatcher import (
    RequestDispatcher,
    empty_response,
    get_request_dispatcher,
    model_response,
)
from users_api.presentation.routers.api.request.query_parser import (
    parse_query_command,
)
from users_api.presentation.routers.api.request.request_decoder import (
    decode_command,
)
from users_api.schemas.client_schemas import (
    ClientCreateRequest,
    ClientIdentityRequest,
    ClientResponse,
    ClientRoleRequest,
    ClientSecretRequest,
    ClientsPageResponse,
    ClientTagsRequest,
    ClientUpdateRequest,
)

Dispatcher = Annotated[RequestDispatcher, Depends(get_request_dispatcher)]


def _client_response(client: Client) -> Response:
    return model_response(ClientResponse.from_entity(client))


def _page_response(page: ClientsPage) -> Response:
    return model_response(ClientsPageResponse.from_entity(page))


def _created_response(client: Client) -> Response:
    return model_response(
        ClientResponse.from_entity(client),
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/users/{client.id}"},
    )


async def register_client(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
    password_pattern: PasswordPattern,
    allow_self_register: AllowSelfRegister,
) -> Response:
    """Register a new client.

    POST /users/ → 201 Created (Location: /users/{id})

    Args:
        request: FastAPI request object.
        dispatcher: Request dispatcher (injected).
        service: Users service (injected).
        password_pattern: Password policy (injected).
        allow_self_register: Self-registration flag passed to the service.

    Returns:
        ClientResponse on 201, error envelope otherwise.
    """
    parsed = await decode_command(
        request,
        ClientCreateRequest,
        lambda body: RegisterClient(
            id=body.id,
            name=body.name,
            tags=body.tags,
            identity=body.credentials.identity,
            secret=body.credentials.secret,
            metadata=body.metadata,
            status=body.status,
            role=body.role,
            password_pattern=password_pattern,
        ),
    )
    return await dispatcher.dispatch(
        request,
        operation="register_client",
        parsed=parsed,
        invoke=lambda session, command: service.register_client(
            session, command.to_client(), allow_self_register
        ),
        render=_created_response,
    )


async def view_client(
    request: Request,
    client_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """View one client.

    GET /users/{id} → 200 OK
    """
    return await dispatcher.dispatch(
        request,
        operation="view_client",
        parsed=Success(value=ViewClient(client_id=client_id)),
        invoke=lambda session, query: service.view_client(session, query.client_id),
        render=_client_response,
    )


async def view_profile(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """View the caller's own client.

    GET /users/profile → 200 OK
    """
    return await dispatcher.dispatch(
        request,
        operation="view_profile",
        parsed=Success(value=ViewProfile()),
        invoke=lambda session, _: service.view_profile(session),
        render=_client_response,
    )


async def list_clients(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """List clients visible to the caller.

    GET /users → 200 OK

    Query parameters: offset, limit, name, identity, status, tag, metadata,
    permission, order, dir, list_perms.
    """
    return await dispatcher.dispatch(
        request,
        operation="list_clients",
        parsed=parse_query_command(request, lambda page: ListClients(page=page)),
        invoke=lambda session, query: service.list_clients(session, query.page),
        render=_page_response,
    )


async def search_clients(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Search clients by name, id or identity.

    GET /users/search → 200 OK

    At least one of name, id or identity is required, each at least
    MIN_SEARCH_QUERY_LENGTH characters long.
    """
    return await dispatcher.dispatch(
        request,
        operation="search_clients",
        parsed=parse_query_command(request, lambda page: SearchClients(page=page)),
        invoke=lambda session, query: service.search_clients(session, query.page),
        render=_page_response,
    )


async def update_client(
    request: Request,
    client_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Update name and metadata.

    PATCH /users/{id} → 200 OK
    """
    parsed = await decode_command(
        request,
        ClientUpdateRequest,
        lambda body: UpdateClient(
            client_id=client_id, name=body.name, metadata=body.metadata
        ),
    )
    return await dispatcher.dispatch(
        request,
        operation="update_client",
        parsed=parsed,
        invoke=lambda session, command: service.update_client(
            session, command.to_client()
        ),
        render=_client_response,
    )


async def update_client_tags(
    request: Request,
    client_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Replace the tags of a client.

    PATCH /users/{id}/tags → 200 OK
    """
    parsed = await decode_command(
        request,
        ClientTagsRequest,
        lambda body: UpdateClientTags(client_id=client_id, tags=body.tags),
    )
    return await dispatcher.dispatch(
        request,
        operation="update_client_tags",
        parsed=parsed,
        invoke=lambda session, command: service.update_client_tags(
            session, command.to_client()
        ),
        render=_client_response,
    )


async def update_client_identity(
    request: Request,
    client_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Change the login identity of a client.

    PATCH /users/{id}/identity → 200 OK
    """
    parsed = await decode_command(
        request,
        ClientIdentityRequest,
        lambda body: UpdateClientIdentity(client_id=client_id, identity=body.identity),
    )
    return await dispatcher.dispatch(
        request,
        operation="update_client_identity",
        parsed=parsed,
        invoke=lambda session, command: service.update_client_identity(
            session, command.client_id, command.identity
        ),
        render=_client_response,
    )


async def update_client_secret(
    request: Request,
    dispatcher: Dispatcher,
    service: UsersService,
    password_pattern: PasswordPattern,
) -> Response:
    """Change the caller's own secret.

    PATCH /users/secret → 200 OK

    The new secret must satisfy the configured password policy.
    """
    parsed = await decode_command(
        request,
        ClientSecretRequest,
        lambda body: UpdateClientSecret(
            old_secret=body.old_secret,
            new_secret=body.new_secret,
            password_pattern=password_pattern,
        ),
    )
    return await dispatcher.dispatch(
        request,
        operation="update_client_secret",
        parsed=parsed,
        invoke=lambda session, command: service.update_client_secret(
            session, command.old_secret, command.new_secret
        ),
        render=_client_response,
    )


async def update_client_role(
    request: Request,
    client_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Change the role of a client.

    PATCH /users/{id}/role → 200 OK
    """
    parsed = await decode_command(
        request,
        ClientRoleRequest,
        lambda body: UpdateClientRole(client_id=client_id, role=body.role),
    )
    return await dispatcher.dispatch(
        request,
        operation="update_client_role",
        parsed=parsed,
        invoke=lambda session, command: service.update_client_role(
            session, command.to_client()
        ),
        render=_client_response,
    )


async def enable_client(
    request: Request,
    client_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """POST /users/{id}/enable → 200 OK"""
    return await dispatcher.dispatch(
        request,
        operation="enable_client",
        parsed=Success(value=ChangeClientStatus(client_id=client_id, enable=True)),
        invoke=lambda session, command: service.enable_client(
            session, command.client_id
        ),
        render=_client_response,
    )


async def disable_client(
    request: Request,
    client_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """POST /users/{id}/disable → 200 OK"""
    return await dispatcher.dispatch(
        request,
        operation="disable_client",
        parsed=Success(value=ChangeClientStatus(client_id=client_id, enable=False)),
        invoke=lambda session, command: service.disable_client(
            session, command.client_id
        ),
        render=_client_response,
    )


async def delete_client(
    request: Request,
    client_id: str,
    dispatcher: Dispatcher,
    service: UsersService,
) -> Response:
    """Delete a client.

    DELETE /users/{id} → 204 No Content
    """
    return await dispatcher.dispatch(
        request,
        operation="delete_client",
        parsed=Success(value=DeleteClient(client_id=client_id)),
        invoke=lambda session, command: service.delete_client(
            session, command.client_id
        ),
        render=lambda _: empty_response(status.HTTP_204_NO_CONTENT),
    )
