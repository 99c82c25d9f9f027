"""Query-string parser for list and search endpoints.

Turns a multi-valued query mapping (key to every value it was given) into a
validated PageQuery.

Rules:
    - A recognized key given more than once is an error. By default that is
      INVALID_QUERY_PARAMS; a DuplicatePolicy can report other codes for
      specific keys (member listings report ``list_perms`` as
      VALIDATION_FAILED).
    - offset/limit are non-negative integers, limit at most MAX_LIMIT_SIZE.
    - status is a known ClientStatus, dir is asc or desc.
    - metadata is a JSON object, list_perms a boolean.
    - tag is a comma-separated list inside one occurrence.
    - Unrecognized keys are ignored.

Usage:
    match parse_page_query(query_values(request)):
        case Success(value=page):
            ...
        case Failure(error=error):
            ...
"""

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from starlette.requests import Request

from users_api.core.constants import MAX_LIMIT_SIZE, TAG_SEPARATOR
from users_api.core.enums import ErrorCode
from users_api.core.errors import ValidationError
from users_api.core.result import Failure, Result, Success
from users_api.domain.enums import ClientStatus, SortDirection
from users_api.domain.value_objects import PageQuery

CommandT = TypeVar("CommandT")

OFFSET_KEY = "offset"
LIMIT_KEY = "limit"
NAME_KEY = "name"
ID_KEY = "id"
IDENTITY_KEY = "identity"
STATUS_KEY = "status"
TAG_KEY = "tag"
METADATA_KEY = "metadata"
PERMISSION_KEY = "permission"
ORDER_KEY = "order"
DIR_KEY = "dir"
LIST_PERMS_KEY = "list_perms"

RECOGNIZED_KEYS: frozenset[str] = frozenset(
    {
        OFFSET_KEY,
        LIMIT_KEY,
        NAME_KEY,
        ID_KEY,
        IDENTITY_KEY,
        STATUS_KEY,
        TAG_KEY,
        METADATA_KEY,
        PERMISSION_KEY,
        ORDER_KEY,
        DIR_KEY,
        LIST_PERMS_KEY,
    }
)

# Accepted boolean spellings
_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


@dataclass(frozen=True, kw_only=True)
class DuplicatePolicy:
    """Error code to report when a key is repeated.

    Attributes:
        default: Code for keys without an override.
        overrides: Per-key codes.

    Example:
        >>> policy = DuplicatePolicy(
        ...     overrides={"list_perms": ErrorCode.VALIDATION_FAILED}
        ... )
        >>> policy.code_for("limit")
        <ErrorCode.INVALID_QUERY_PARAMS: 'invalid_query_params'>
    """

    default: ErrorCode = ErrorCode.INVALID_QUERY_PARAMS
    overrides: Mapping[str, ErrorCode] = field(default_factory=dict)

    def code_for(self, key: str) -> ErrorCode:
        """Return the code reported for a repeated ``key``."""
        return self.overrides.get(key, self.default)


DEFAULT_DUPLICATE_POLICY = DuplicatePolicy()
"""Every repeated key is INVALID_QUERY_PARAMS."""

MEMBERS_DUPLICATE_POLICY = DuplicatePolicy(
    overrides={LIST_PERMS_KEY: ErrorCode.VALIDATION_FAILED}
)
"""Member listings report a repeated ``list_perms`` as a plain validation error."""


def query_values(request: Request) -> dict[str, list[str]]:
    """Collect every value of every query key, in request order.

    Args:
        request: Incoming request.

    Returns:
        Mapping of key to all of its values.
    """
    values: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        values.setdefault(key, []).append(value)
    return values


def _invalid(key: str, message: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message=f"invalid query parameter {key}: {message}",
            field=key,
        )
    )


def _parse_uint(key: str, raw: str) -> Result[int, ValidationError]:
    if not (raw.isascii() and raw.isdigit()):
        return _invalid(key, "must be a non-negative integer")
    try:
        return Success(value=int(raw))
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return _invalid(key, "integer is too large")


def _parse_bool(key: str, raw: str) -> Result[bool, ValidationError]:
    if raw in _TRUE_VALUES:
        return Success(value=True)
    if raw in _FALSE_VALUES:
        return Success(value=False)
    return _invalid(key, "must be a boolean")


def _parse_metadata(raw: str) -> Result[dict[str, Any], ValidationError]:
    try:
        metadata = json.loads(raw)
    except (ValueError, RecursionError):
        # JSONDecodeError, oversized integers and excessive nesting
        return _invalid(METADATA_KEY, "malformed JSON")
    if not isinstance(metadata, dict):
        return _invalid(METADATA_KEY, "must be a JSON object")
    return Success(value=metadata)


def _parse_tags(raw: str) -> tuple[str, ...]:
    return tuple(tag.strip() for tag in raw.split(TAG_SEPARATOR) if tag.strip())


def parse_page_query(
    params: Mapping[str, Sequence[str]],
    *,
    policy: DuplicatePolicy = DEFAULT_DUPLICATE_POLICY,
) -> Result[PageQuery, ValidationError]:
    """Parse and validate list/search query parameters.

    Args:
        params: Mapping of key to every value supplied for it.
        policy: Error codes for repeated keys.

    Returns:
        Success(PageQuery) with defaults for absent keys, or the first
        Failure found.

    Example:
        >>> parse_page_query({"limit": ["5"], "tag": ["a,b"]})
        Success(value=PageQuery(offset=0, limit=5, ..., tags=('a', 'b'), ...))
    """
    single: dict[str, str] = {}
    for key, values in params.items():
        if key not in RECOGNIZED_KEYS:
            continue
        if len(values) > 1:
            return Failure(
                error=ValidationError(
                    code=policy.code_for(key),
                    message=f"query parameter {key} given more than once",
                    field=key,
                )
            )
        if values:
            single[key] = values[0]

    fields: dict[str, Any] = {}

    for key in (OFFSET_KEY, LIMIT_KEY):
        if key in single:
            match _parse_uint(key, single[key]):
                case Success(value=number):
                    fields[key] = number
                case Failure() as failure:
                    return failure

    if fields.get(LIMIT_KEY, 0) > MAX_LIMIT_SIZE:
        return _invalid(LIMIT_KEY, f"must not exceed {MAX_LIMIT_SIZE}")

    if STATUS_KEY in single:
        if not ClientStatus.is_valid(single[STATUS_KEY]):
            return _invalid(STATUS_KEY, f"unknown status {single[STATUS_KEY]}")
        fields["status"] = ClientStatus(single[STATUS_KEY])

    if DIR_KEY in single:
        if single[DIR_KEY] not in {direction.value for direction in SortDirection}:
            return _invalid(DIR_KEY, "must be asc or desc")
        fields["direction"] = SortDirection(single[DIR_KEY])

    if METADATA_KEY in single:
        match _parse_metadata(single[METADATA_KEY]):
            case Success(value=metadata):
                fields["metadata"] = metadata
            case Failure() as failure:
                return failure

    if LIST_PERMS_KEY in single:
        match _parse_bool(LIST_PERMS_KEY, single[LIST_PERMS_KEY]):
            case Success(value=flag):
                fields["list_perms"] = flag
            case Failure() as failure:
                return failure

    if TAG_KEY in single:
        fields["tags"] = _parse_tags(single[TAG_KEY])

    for key in (NAME_KEY, ID_KEY, IDENTITY_KEY, PERMISSION_KEY, ORDER_KEY):
        if single.get(key):
            fields[key] = single[key]

    return Success(value=PageQuery(**fields))


def parse_query_command(
    request: Request,
    build: Callable[[PageQuery], CommandT],
    *,
    policy: DuplicatePolicy = DEFAULT_DUPLICATE_POLICY,
) -> Result[CommandT, ValidationError]:
    """Parse the request's query string and build a query command from it.

    Args:
        request: Incoming request.
        build: Turns the PageQuery into a command (adds path values).
        policy: Error codes for repeated keys.

    Returns:
        Success with the command, or the parsing Failure.
    """
    match parse_page_query(query_values(request), policy=policy):
        case Success(value=page):
            return Success(value=build(page))
        case Failure() as failure:
            return failure
