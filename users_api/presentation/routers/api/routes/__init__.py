"""Route registry package.

Modules:
    metadata: Core types (RouteMetadata, AuthPolicy, ErrorSpec, ...)
    convertors: The ``segment`` path convertor
    registry: ROUTE_REGISTRY, the list of all route specifications
    generator: register_routes_from_registry()
"""

from users_api.presentation.routers.api.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)

__all__ = [
    "AuthLevel",
    "AuthPolicy",
    "ErrorSpec",
    "HTTPMethod",
    "RouteMetadata",
]
