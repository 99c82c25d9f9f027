"""Centralized constants for internal implementation details.

These are fixed parts of the HTTP contract, NOT environment-specific
configuration. For environment-specific settings, use
``users_api/core/config.py`` instead.

Categories:
- Pagination: page size bounds and defaults
- Limits: field length bounds
- Query defaults: ordering and permission defaults
- Prefixes and media types

Example:
    >>> from users_api.core.constants import MAX_LIMIT_SIZE
    >>> limit <= MAX_LIMIT_SIZE
"""

# =============================================================================
# Pagination
# =============================================================================

MAX_LIMIT_SIZE: int = 100
"""Largest page a list endpoint will return."""

DEFAULT_LIMIT: int = 10
"""Page size used when ``limit`` is absent."""

DEFAULT_OFFSET: int = 0
"""Offset used when ``offset`` is absent."""


# =============================================================================
# Limits
# =============================================================================

MAX_NAME_SIZE: int = 1024
"""Maximum length of a client name, in characters."""

MIN_SEARCH_QUERY_LENGTH: int = 3
"""Minimum length of any supplied search term."""


# =============================================================================
# Query Defaults
# =============================================================================

DEFAULT_ORDER: str = "updated_at"
"""Sort field used when ``order`` is absent."""

DEFAULT_PERMISSION: str = "view"
"""Permission filter used when ``permission`` is absent."""

TAG_SEPARATOR: str = ","
"""Separator between tags inside a single ``tag`` parameter."""


# =============================================================================
# Prefixes and Media Types
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

JSON_CONTENT_TYPE: str = "application/json"
"""The only media type accepted for request bodies."""

TRACE_ID_HEADER: str = "X-Trace-Id"
"""Header carrying the request trace identifier."""
