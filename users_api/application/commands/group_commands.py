"""Group membership commands."""

from dataclasses import dataclass, field

from users_api.core.enums import ErrorCode
from users_api.core.errors import ValidationError
from users_api.core.result import Result
from users_api.core.validation import first_failure, validate_id, validate_not_empty

USERS_MEMBER_KIND = "users"
GROUPS_MEMBER_KIND = "groups"
PARENT_GROUP_RELATION = "parent_group"


@dataclass(frozen=True, kw_only=True)
class GroupRelation:
    """Assign members to, or unassign them from, a group.

    Attributes:
        domain_id: Domain from the path.
        group_id: Group from the path.
        relation: Relation members hold on the group.
        member_kind: ``users`` or ``groups``.
        member_ids: Members to (un)assign.

    Example:
        >>> GroupRelation(
        ...     domain_id="d1",
        ...     group_id="g1",
        ...     relation="viewer",
        ...     member_kind=USERS_MEMBER_KIND,
        ...     member_ids=["u1"],
        ... ).validate()
        Success(value=None)
    """

    domain_id: str
    group_id: str
    relation: str = ""
    member_kind: str = USERS_MEMBER_KIND
    member_ids: list[str] = field(default_factory=list)

    def validate(self) -> Result[None, ValidationError]:
        """Require ids, a relation and at least one member."""
        return first_failure(
            validate_id(self.domain_id, "domain_id"),
            validate_id(self.group_id, "group_id"),
            validate_not_empty(
                self.relation, "relation", code=ErrorCode.MISSING_RELATION
            ),
            validate_not_empty(
                self.member_ids, f"{self.member_kind[:-1]}_ids", code=ErrorCode.EMPTY_LIST
            ),
        )
