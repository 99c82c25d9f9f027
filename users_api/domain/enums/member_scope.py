"""Entity kinds whose members can be listed.

A single ``list_members`` operation serves every
``GET /{domain_id}/<scope>/{id}/users`` endpoint; the scope says which kind
of entity the id refers to.
"""

from enum import Enum


class MemberScope(str, Enum):
    """Kind of entity a member listing is scoped to."""

    GROUPS = "groups"
    CHANNELS = "channels"
    THINGS = "things"
    DOMAINS = "domains"
