"""Client queries (read operations).

Queries represent requests for data without side effects. All queries are
immutable (frozen=True) and use keyword-only arguments (kw_only=True).
Query-string parsing happens before a query is built, so ``page`` is always
already well formed.
"""

from dataclasses import dataclass, field

from users_api.core.errors import ValidationError
from users_api.core.result import Result
from users_api.core.validation import first_failure, validate_id, validate_search_terms
from users_api.domain.enums import MemberScope
from users_api.domain.value_objects import PageQuery


@dataclass(frozen=True, kw_only=True)
class ViewClient:
    """Fetch one client by id.

    Attributes:
        client_id: Client to fetch (path).
    """

    client_id: str

    def validate(self) -> Result[None, ValidationError]:
        """Require the id."""
        return first_failure(validate_id(self.client_id))


@dataclass(frozen=True, kw_only=True)
class ViewProfile:
    """Fetch the caller's own client."""

    def validate(self) -> Result[None, ValidationError]:
        """Nothing to check; the session identifies the client."""
        return first_failure()


@dataclass(frozen=True, kw_only=True)
class ListClients:
    """List clients visible to the caller.

    Attributes:
        page: Filter and pagination.
    """

    page: PageQuery = field(default_factory=PageQuery)

    def validate(self) -> Result[None, ValidationError]:
        """Nothing beyond query parsing to check."""
        return first_failure()


@dataclass(frozen=True, kw_only=True)
class SearchClients:
    """Search clients by name, id or identity.

    At least one term is required and every supplied term must be long
    enough to be selective.

    Example:
        >>> SearchClients(page=PageQuery(name="ali")).validate()
        Success(value=None)
    """

    page: PageQuery = field(default_factory=PageQuery)

    def validate(self) -> Result[None, ValidationError]:
        """Check the search terms."""
        return first_failure(
            validate_search_terms(
                {
                    "name": self.page.name,
                    "id": self.page.id,
                    "identity": self.page.identity,
                }
            )
        )


@dataclass(frozen=True, kw_only=True)
class ListMembers:
    """List clients related to a group, channel, thing or domain.

    Attributes:
        domain_id: Domain from the path.
        scope: Kind of entity ``scope_id`` refers to.
        scope_id: Entity id from the path (equals ``domain_id`` for domains).
        page: Filter and pagination.
    """

    domain_id: str
    scope: MemberScope
    scope_id: str
    page: PageQuery = field(default_factory=PageQuery)

    def validate(self) -> Result[None, ValidationError]:
        """Require the domain and scope ids."""
        return first_failure(
            validate_id(self.domain_id, "domain_id"),
            validate_id(self.scope_id, f"{self.scope.value[:-1]}_id"),
        )
