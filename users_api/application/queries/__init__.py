"""Application queries (read requests)."""

from users_api.application.queries.client_queries import (
    ListClients,
    ListMembers,
    SearchClients,
    ViewClient,
    ViewProfile,
)

__all__ = [
    "ListClients",
    "ListMembers",
    "SearchClients",
    "ViewClient",
    "ViewProfile",
]
