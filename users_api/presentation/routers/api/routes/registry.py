"""Route Registry - Single Source of Truth for all routes.

ROUTE_REGISTRY is the authoritative, ordered list of the service's endpoints.

Ordering rules (Starlette matches in registration order):
    - Static paths (/users/profile, /users/search, /users/secret,
      /users/tokens/...) come before /users/{id}.
    - Ids in the middle of a path use the ``segment`` convertor so an empty
      id reaches the handler; trailing ids use the default convertor.

Usage:
    from users_api.presentation.routers.api.routes.registry import ROUTE_REGISTRY
"""

from users_api.presentation.routers.api.clients import (
    delete_client,
    disable_client,
    enable_client,
    list_clients,
    register_client,
    search_clients,
    update_client,
    update_client_identity,
    update_client_role,
    update_client_secret,
    update_client_tags,
    view_client,
    view_profile,
)
from users_api.presentation.routers.api.groups import (
    assign_groups,
    assign_users,
    unassign_groups,
    unassign_users,
)
from users_api.presentation.routers.api.members import (
    list_channel_members,
    list_domain_members,
    list_group_members,
    list_thing_members,
)
from users_api.presentation.routers.api.password_resets import (
    request_password_reset,
    reset_password,
)
from users_api.presentation.routers.api.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from users_api.presentation.routers.api.tokens import issue_token, refresh_token
from users_api.schemas.client_schemas import ClientResponse, ClientsPageResponse
from users_api.schemas.password_schemas import PasswordResetMessageResponse
from users_api.schemas.token_schemas import TokenResponse

BEARER = AuthPolicy(level=AuthLevel.BEARER)

_VALIDATION = ErrorSpec(status=400, description="Validation error")
_UNAUTHENTICATED = ErrorSpec(status=401, description="Missing or invalid token")
_FORBIDDEN = ErrorSpec(status=403, description="Not allowed")
_NOT_FOUND = ErrorSpec(status=404, description="Not found")
_CONFLICT = ErrorSpec(status=409, description="Already exists")
_UNSUPPORTED = ErrorSpec(status=415, description="Content type must be application/json")

READ_ERRORS = [_VALIDATION, _UNAUTHENTICATED, _FORBIDDEN, _NOT_FOUND]
WRITE_ERRORS = [_VALIDATION, _UNAUTHENTICATED, _FORBIDDEN, _NOT_FOUND, _UNSUPPORTED]


ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Users: static paths first
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/",
        handler=register_client,
        resource="users",
        tags=["Users"],
        summary="Register user",
        description="Create a user. Responds with a Location header.",
        operation_id="register_client",
        response_model=ClientResponse,
        status_code=201,
        errors=[*WRITE_ERRORS, _CONFLICT],
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/profile",
        handler=view_profile,
        resource="users",
        tags=["Users"],
        summary="View own profile",
        operation_id="view_profile",
        response_model=ClientResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/search",
        handler=search_clients,
        resource="users",
        tags=["Users"],
        summary="Search users",
        description="Search by name, id or identity.",
        operation_id="search_clients",
        response_model=ClientsPageResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users",
        handler=list_clients,
        resource="users",
        tags=["Users"],
        summary="List users",
        operation_id="list_clients",
        response_model=ClientsPageResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/users/secret",
        handler=update_client_secret,
        resource="users",
        tags=["Users"],
        summary="Change own secret",
        operation_id="update_client_secret",
        response_model=ClientResponse,
        errors=WRITE_ERRORS,
        auth_policy=BEARER,
    ),
    # =========================================================================
    # Tokens
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/tokens/issue",
        handler=issue_token,
        resource="tokens",
        tags=["Tokens"],
        summary="Issue tokens",
        description="Exchange credentials for an access and refresh token.",
        operation_id="issue_token",
        response_model=TokenResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHENTICATED, _NOT_FOUND, _UNSUPPORTED],
        auth_policy=AuthPolicy(
            level=AuthLevel.PUBLIC,
            rationale="Credentials are in the body",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/tokens/refresh",
        handler=refresh_token,
        resource="tokens",
        tags=["Tokens"],
        summary="Refresh tokens",
        description="The refresh token is sent as the bearer token.",
        operation_id="refresh_token",
        response_model=TokenResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHENTICATED, _UNSUPPORTED],
        auth_policy=BEARER,
    ),
    # =========================================================================
    # Users: by id
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{client_id}",
        handler=view_client,
        resource="users",
        tags=["Users"],
        summary="View user",
        operation_id="view_client",
        response_model=ClientResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/users/{client_id}",
        handler=update_client,
        resource="users",
        tags=["Users"],
        summary="Update user",
        description="Update name and metadata.",
        operation_id="update_client",
        response_model=ClientResponse,
        errors=WRITE_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/users/{client_id:segment}/tags",
        handler=update_client_tags,
        resource="users",
        tags=["Users"],
        summary="Update user tags",
        operation_id="update_client_tags",
        response_model=ClientResponse,
        errors=WRITE_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/users/{client_id:segment}/identity",
        handler=update_client_identity,
        resource="users",
        tags=["Users"],
        summary="Update user identity",
        operation_id="update_client_identity",
        response_model=ClientResponse,
        errors=[*WRITE_ERRORS, _CONFLICT],
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/users/{client_id:segment}/role",
        handler=update_client_role,
        resource="users",
        tags=["Users"],
        summary="Update user role",
        operation_id="update_client_role",
        response_model=ClientResponse,
        errors=WRITE_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/{client_id:segment}/enable",
        handler=enable_client,
        resource="users",
        tags=["Users"],
        summary="Enable user",
        operation_id="enable_client",
        response_model=ClientResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/{client_id:segment}/disable",
        handler=disable_client,
        resource="users",
        tags=["Users"],
        summary="Disable user",
        operation_id="disable_client",
        response_model=ClientResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/users/{client_id}",
        handler=delete_client,
        resource="users",
        tags=["Users"],
        summary="Delete user",
        operation_id="delete_client",
        status_code=204,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    # =========================================================================
    # Password resets
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/password/reset-request",
        handler=request_password_reset,
        resource="password_resets",
        tags=["Password Resets"],
        summary="Request password reset",
        description="Email a reset link. The reset page host is the Referer.",
        operation_id="request_password_reset",
        response_model=PasswordResetMessageResponse,
        status_code=201,
        errors=[_VALIDATION, _NOT_FOUND, _UNSUPPORTED],
        auth_policy=AuthPolicy(
            level=AuthLevel.PUBLIC,
            rationale="Runs before the user can log in",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/password/reset",
        handler=reset_password,
        resource="password_resets",
        tags=["Password Resets"],
        summary="Reset password",
        operation_id="reset_password",
        response_model=PasswordResetMessageResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHENTICATED, _UNSUPPORTED],
        auth_policy=AuthPolicy(
            level=AuthLevel.BODY_TOKEN,
            rationale="The reset token is in the body",
        ),
    ),
    # =========================================================================
    # Members
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/{domain_id:segment}/groups/{group_id:segment}/users",
        handler=list_group_members,
        resource="members",
        tags=["Members"],
        summary="List group members",
        operation_id="list_group_members",
        response_model=ClientsPageResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/{domain_id:segment}/channels/{channel_id:segment}/users",
        handler=list_channel_members,
        resource="members",
        tags=["Members"],
        summary="List channel members",
        operation_id="list_channel_members",
        response_model=ClientsPageResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/{domain_id:segment}/things/{thing_id:segment}/users",
        handler=list_thing_members,
        resource="members",
        tags=["Members"],
        summary="List thing members",
        operation_id="list_thing_members",
        response_model=ClientsPageResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/{domain_id:segment}/users",
        handler=list_domain_members,
        resource="members",
        tags=["Members"],
        summary="List domain members",
        operation_id="list_domain_members",
        response_model=ClientsPageResponse,
        errors=READ_ERRORS,
        auth_policy=BEARER,
    ),
    # =========================================================================
    # Group membership
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/{domain_id:segment}/groups/{group_id:segment}/users/assign",
        handler=assign_users,
        resource="groups",
        tags=["Groups"],
        summary="Assign users to group",
        operation_id="assign_users",
        status_code=201,
        errors=WRITE_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/{domain_id:segment}/groups/{group_id:segment}/users/unassign",
        handler=unassign_users,
        resource="groups",
        tags=["Groups"],
        summary="Unassign users from group",
        operation_id="unassign_users",
        status_code=204,
        errors=WRITE_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/{domain_id:segment}/groups/{group_id:segment}/groups/assign",
        handler=assign_groups,
        resource="groups",
        tags=["Groups"],
        summary="Assign child groups",
        operation_id="assign_groups",
        status_code=201,
        errors=WRITE_ERRORS,
        auth_policy=BEARER,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/{domain_id:segment}/groups/{group_id:segment}/groups/unassign",
        handler=unassign_groups,
        resource="groups",
        tags=["Groups"],
        summary="Unassign child groups",
        operation_id="unassign_groups",
        status_code=204,
        errors=WRITE_ERRORS,
        auth_policy=BEARER,
    ),
]
