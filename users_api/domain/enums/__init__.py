"""Domain enums.

Available Enums:
    - ClientStatus: enabled, disabled, deleted and the ``all`` list wildcard
    - ClientRole: user, admin
    - MemberScope: entity kinds a member listing can be scoped to
    - SortDirection: asc, desc
"""

from users_api.domain.enums.client_role import ClientRole
from users_api.domain.enums.client_status import ClientStatus
from users_api.domain.enums.member_scope import MemberScope
from users_api.domain.enums.sort_direction import SortDirection

__all__ = [
    "ClientRole",
    "ClientStatus",
    "MemberScope",
    "SortDirection",
]
