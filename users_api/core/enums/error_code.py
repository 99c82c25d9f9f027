"""Machine-readable error codes.

The enum value is the short ``error`` string written into every error
response body, so values are part of the public HTTP contract.

Categories:
- Validation errors (request shape, query parameters, path identifiers)
- Credential format errors (passwords, search terms)
- Domain enum violations (status, role)
- Authentication errors (missing bearer token, rejected credentials)
- Authorization, conflict and lookup errors
- Transport and internal errors
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_QUERY_PARAMS = "invalid_query_params"
    MISSING_ID = "missing_id"
    MALFORMED_ENTITY = "malformed_entity"
    INVALID_ID = "invalid_id"
    NAME_TOO_LONG = "name_too_long"
    MISSING_IDENTITY = "missing_identity"
    MISSING_EMAIL = "missing_email"
    MISSING_HOST = "missing_host"
    MISSING_RELATION = "missing_relation"
    EMPTY_LIST = "empty_list"

    # Credential and search format errors
    MISSING_PASS = "missing_pass"
    PASSWORD_FORMAT = "password_format"
    PASSWORD_MISMATCH = "password_mismatch"
    EMPTY_SEARCH_QUERY = "empty_search_query"
    LEN_SEARCH_QUERY = "len_search_query"

    # Domain enum violations
    INVALID_STATUS = "invalid_status"
    INVALID_ROLE = "invalid_role"

    # Authentication errors
    BEARER_TOKEN = "bearer_token"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    AUTHORIZATION_FAILED = "authorization_failed"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"
    RESOURCE_CONFLICT = "resource_conflict"

    # Transport errors
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    METHOD_NOT_ALLOWED = "method_not_allowed"

    # Internal errors
    INTERNAL_ERROR = "internal_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
