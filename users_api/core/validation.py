"""Validation framework for request input.

Utility functions for the checks commands run in ``validate()``. All
functions return Result types for consistent error handling.

Usage:
    from users_api.core.validation import first_failure, validate_id

    result = first_failure(
        validate_id(command.client_id),
        validate_max_length(command.name, MAX_NAME_SIZE, "name"),
    )
    match result:
        case Success():
            pass
        case Failure(error=error):
            print(error.message)
"""

import re
from typing import Any
from uuid import UUID

from users_api.core.constants import MIN_SEARCH_QUERY_LENGTH
from users_api.core.enums import ErrorCode
from users_api.core.errors import ValidationError
from users_api.core.result import Failure, Result, Success


def first_failure(*checks: Result[Any, ValidationError]) -> Result[None, ValidationError]:
    """Collapse several checks into the first failure, if any.

    Args:
        *checks: Results of individual validations, in reporting order.

    Returns:
        The first Failure found, or Success(None) when every check passed.
    """
    for check in checks:
        if isinstance(check, Failure):
            return check
    return Success(value=None)


def validate_not_empty(
    value: Any,
    field_name: str,
    *,
    code: ErrorCode = ErrorCode.VALIDATION_FAILED,
) -> Result[Any, ValidationError]:
    """Validate that a value is not empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.
        code: Error code reported when the value is empty.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            error=ValidationError(
                code=code,
                message=f"{field_name} cannot be empty",
                field=field_name,
            )
        )
    if isinstance(value, (list, tuple)) and not value:
        return Failure(
            error=ValidationError(
                code=code,
                message=f"{field_name} cannot be an empty list",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_id(value: str, field_name: str = "id") -> Result[str, ValidationError]:
    """Validate that a path identifier was supplied.

    Args:
        value: Identifier taken from the request path.
        field_name: Name of the path parameter.

    Returns:
        Success with the identifier, Failure with MISSING_ID otherwise.
    """
    if not value or not value.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.MISSING_ID,
                message="missing entity id",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_uuid(value: str, field_name: str = "id") -> Result[str, ValidationError]:
    """Validate that a value is a well-formed UUID.

    Args:
        value: String to check.
        field_name: Name of the field being validated.

    Returns:
        Success with value if it parses as a UUID, Failure otherwise.
    """
    try:
        UUID(value)
    except ValueError:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_ID,
                message=f"{field_name} is not a valid UUID",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_max_length(
    value: str,
    max_length: int,
    field_name: str,
    *,
    code: ErrorCode = ErrorCode.NAME_TOO_LONG,
) -> Result[str, ValidationError]:
    """Validate maximum string length.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.
        code: Error code reported when the value is too long.

    Returns:
        Success with value if short enough, Failure otherwise.
    """
    if len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=code,
                message=f"{field_name} must be at most {max_length} characters",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_password(
    password: str,
    pattern: re.Pattern[str],
    field_name: str = "password",
) -> Result[str, ValidationError]:
    """Validate that a password is present and matches the password policy.

    Args:
        password: Plaintext password.
        pattern: Compiled password policy.
        field_name: Name of the field being validated.

    Returns:
        Success with password, Failure with MISSING_PASS or PASSWORD_FORMAT.
    """
    if not password:
        return Failure(
            error=ValidationError(
                code=ErrorCode.MISSING_PASS,
                message="missing password",
                field=field_name,
            )
        )
    if not pattern.match(password):
        return Failure(
            error=ValidationError(
                code=ErrorCode.PASSWORD_FORMAT,
                message="password does not meet the password policy",
                field=field_name,
            )
        )
    return Success(value=password)


def validate_search_terms(terms: dict[str, str]) -> Result[dict[str, str], ValidationError]:
    """Validate search terms.

    At least one term must be supplied, and every supplied term must be at
    least MIN_SEARCH_QUERY_LENGTH characters long.

    Args:
        terms: Mapping of search key (name, id, identity) to its value.

    Returns:
        Success with terms, Failure with EMPTY_SEARCH_QUERY or LEN_SEARCH_QUERY.
    """
    supplied = {key: value for key, value in terms.items() if value}
    if not supplied:
        return Failure(
            error=ValidationError(
                code=ErrorCode.EMPTY_SEARCH_QUERY,
                message="search query must not be empty",
            )
        )
    for key, value in supplied.items():
        if len(value) < MIN_SEARCH_QUERY_LENGTH:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.LEN_SEARCH_QUERY,
                    message=(
                        f"search term must be at least "
                        f"{MIN_SEARCH_QUERY_LENGTH} characters"
                    ),
                    field=key,
                )
            )
    return Success(value=terms)
