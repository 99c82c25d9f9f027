"""Users API router.

All routes are generated from the route registry at import time.
See routes/registry.py for the complete route catalog.

Resources:
    /users                   - Users (clients) management
    /users/tokens            - Token issue and refresh
    /password                - Password reset
    /{domain_id}/.../users   - Member listings
    /{domain_id}/groups/...  - Group membership
"""

from fastapi import APIRouter

from users_api.presentation.routers.api.routes.generator import (
    register_routes_from_registry,
)
from users_api.presentation.routers.api.routes.registry import ROUTE_REGISTRY

api_router = APIRouter()
register_routes_from_registry(api_router, ROUTE_REGISTRY)

__all__ = [
    "api_router",
]
