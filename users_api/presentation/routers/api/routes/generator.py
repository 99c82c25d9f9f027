"""Route generator for the route registry.

Turns RouteMetadata entries into FastAPI routes at application startup.

Usage:
    from users_api.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from users_api.presentation.routers.api.routes.generator import (
        register_routes_from_registry,
    )

    router = APIRouter()
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Request, Security

from users_api.presentation.routers.api.errors import ErrorResponse
from users_api.presentation.routers.api.middleware.auth_dependencies import (
    bearer_scheme,
)
from users_api.presentation.routers.api.routes import convertors  # noqa: F401
from users_api.presentation.routers.api.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Routes are added in registry order, which is also Starlette's matching
    order: static paths must be listed before parameterized siblings.

    Args:
        router: FastAPI APIRouter to register routes on.
        registry: RouteMetadata entries to convert into routes.
    """
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=_build_dependencies(metadata.auth_policy),
            deprecated=metadata.deprecated,
        )


def auth_level_dependency(level: AuthLevel) -> Callable[[Request], None]:
    """Build a dependency recording ``level`` on ``request.state.auth_level``.

    The RequestDispatcher reads the recorded level to decide where the
    credential comes from, so a handler cannot disagree with its registry
    entry.
    """

    def record_auth_level(request: Request) -> None:
        request.state.auth_level = level

    return record_auth_level


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Build FastAPI dependencies from an auth policy.

    Every route records its auth level for the RequestDispatcher; bearer
    routes also get the non-enforcing ``bearer_scheme`` so OpenAPI shows the
    lock.

    Raises:
        ValueError: For an unknown auth level.
    """
    record = Depends(auth_level_dependency(auth_policy.level))
    match auth_policy.level:
        case AuthLevel.BEARER:
            return [record, Security(bearer_scheme)]
        case AuthLevel.PUBLIC | AuthLevel.BODY_TOKEN:
            return [record]
        case _:
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build the OpenAPI responses dict from error specifications."""
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ErrorResponse,
        }
        for error in errors
    }
