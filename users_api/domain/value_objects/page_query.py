"""Filter and pagination parameters for list and search operations.

Built by the query parser from a request's query string, then handed to the
users service unchanged.
"""

from dataclasses import dataclass, field
from typing import Any

from users_api.core.constants import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DEFAULT_ORDER,
    DEFAULT_PERMISSION,
)
from users_api.domain.enums import ClientStatus, SortDirection


@dataclass(frozen=True, kw_only=True)
class PageQuery:
    """Validated list/search parameters.

    Attributes:
        offset: Number of entries to skip.
        limit: Page size, at most MAX_LIMIT_SIZE.
        name: Name filter (substring match by the service).
        id: Client id filter, used by search.
        identity: Identity filter.
        status: Status filter; ALL matches every status.
        tags: Tags filter, in the order supplied.
        metadata: Metadata filter (JSON object).
        permission: Permission the caller must hold on listed entries.
        order: Field to sort by.
        direction: Sort direction.
        list_perms: Whether to include the caller's permissions per entry.
    """

    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT
    name: str = ""
    id: str = ""
    identity: str = ""
    status: ClientStatus = ClientStatus.ENABLED
    tags: tuple[str, ...] = ()
    metadata: dict[str, Any] = field(default_factory=dict)
    permission: str = DEFAULT_PERMISSION
    order: str = DEFAULT_ORDER
    direction: SortDirection = SortDirection.DESC
    list_perms: bool = False
