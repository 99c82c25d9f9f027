"""Domain value objects (immutable, no identity)."""

from users_api.domain.value_objects.page_query import PageQuery

__all__ = ["PageQuery"]
