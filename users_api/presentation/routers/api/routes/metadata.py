"""Route metadata types for the route registry.

The registry is the single source of truth for the service's HTTP surface:
every route is declared once as a RouteMetadata entry and turned into a
FastAPI route at startup.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, auth, docs)
    HTTPMethod: HTTP method enum
    AuthLevel / AuthPolicy: Where the credential for a route comes from
    ErrorSpec: Error response specification for OpenAPI

Usage:
    from users_api.presentation.routers.api.routes.metadata import RouteMetadata

    metadata = RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/profile",
        handler=view_profile,
        resource="users",
        tags=["Users"],
        summary="View own profile",
        response_model=ClientResponse,
        auth_policy=AuthPolicy(level=AuthLevel.BEARER),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods used by the service."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Where a route's credential comes from.

    Attributes:
        PUBLIC: No credential (token issue, reset request).
        BEARER: Bearer token in the Authorization header.
        BODY_TOKEN: Token carried in the request body (password reset).
    """

    PUBLIC = "public"
    BEARER = "bearer"
    BODY_TOKEN = "body_token"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    The RequestDispatcher performs the authentication itself; the policy
    documents it and drives the OpenAPI security scheme.

    Attributes:
        level: Credential source.
        rationale: Optional explanation for non-bearer routes.

    Examples:
        >>> AuthPolicy(level=AuthLevel.BEARER)
        >>> AuthPolicy(level=AuthLevel.PUBLIC, rationale="Runs before login")
    """

    level: AuthLevel
    rationale: str | None = None


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code.
        description: Human-readable error description.
        model: Optional response model (defaults to ErrorResponse).
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for one route.

    Identity fields:
        method: HTTP method.
        path: URL path with placeholders (``{id}`` or ``{id:segment}``).
        handler: Async function implementing the endpoint.

    Grouping fields:
        resource: Resource category (e.g., "users", "tokens").
        tags: OpenAPI tags.

    OpenAPI documentation:
        summary, description, operation_id.

    Request/Response:
        response_model: Success response schema (None for empty bodies).
        status_code: Success status.
        errors: Possible error responses.

    Behavior:
        auth_policy: Credential source.
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    auth_policy: AuthPolicy

    deprecated: bool = False
