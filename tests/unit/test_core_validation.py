"""Unit tests for core validation functions.

Tests cover:
- first_failure: ordering of reported failures
- validate_not_empty: strings, lists, custom codes
- validate_id / validate_uuid: missing and malformed ids
- validate_max_length: boundary cases
- validate_password: missing and policy violations
- validate_search_terms: empty and too-short terms
"""

import re

import pytest

from users_api.core.constants import MAX_NAME_SIZE
from users_api.core.enums import ErrorCode
from users_api.core.result import Failure, Success
from users_api.core.validation import (
    first_failure,
    validate_id,
    validate_max_length,
    validate_not_empty,
    validate_password,
    validate_search_terms,
    validate_uuid,
)

PATTERN = re.compile(r"^.{8,}$")


@pytest.mark.unit
class TestFirstFailure:
    """Test first_failure helper."""

    def test_returns_success_when_all_pass(self):
        """Should return Success(None) when every check passed."""
        result = first_failure(Success(value=1), Success(value="a"))

        assert result == Success(value=None)

    def test_returns_success_with_no_checks(self):
        """Should return Success(None) for an empty check list."""
        assert first_failure() == Success(value=None)

    def test_returns_first_failure_in_order(self):
        """Should report the earliest failure, not the last."""
        result = first_failure(
            Success(value=1),
            validate_id(""),
            validate_uuid("not-a-uuid"),
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_ID


@pytest.mark.unit
class TestValidateNotEmpty:
    """Test validate_not_empty function."""

    def test_passes_with_value(self):
        """Should pass a non-empty string through."""
        result = validate_not_empty("hello", "field")

        assert result == Success(value="hello")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_fails_with_empty_strings(self, value):
        """Should fail for None, empty and whitespace-only strings."""
        result = validate_not_empty(value, "field")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "field"

    def test_fails_with_empty_list(self):
        """Should fail for an empty list."""
        result = validate_not_empty([], "user_ids", code=ErrorCode.EMPTY_LIST)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMPTY_LIST

    def test_uses_custom_code(self):
        """Should report the given error code."""
        result = validate_not_empty("", "email", code=ErrorCode.MISSING_EMAIL)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_EMAIL


@pytest.mark.unit
class TestValidateIds:
    """Test validate_id and validate_uuid."""

    @pytest.mark.parametrize("value", ["", " "])
    def test_missing_id(self, value):
        """Should report MISSING_ID for blank ids."""
        result = validate_id(value)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_ID

    def test_present_id(self):
        """Should accept any non-blank id (format is the service's concern)."""
        assert validate_id("abc") == Success(value="abc")

    def test_invalid_uuid(self):
        """Should report INVALID_ID for a malformed UUID."""
        result = validate_uuid("not-a-uuid")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ID

    def test_valid_uuid(self):
        """Should accept a well-formed UUID."""
        value = "c2f0e5d4-8f3b-4b8e-9d47-1f1a2b3c4d5e"

        assert validate_uuid(value) == Success(value=value)


@pytest.mark.unit
class TestValidateMaxLength:
    """Test validate_max_length function."""

    def test_at_limit(self):
        """Should accept a value exactly at the limit."""
        value = "a" * MAX_NAME_SIZE

        assert isinstance(validate_max_length(value, MAX_NAME_SIZE, "name"), Success)

    def test_over_limit(self):
        """Should report NAME_TOO_LONG one character over the limit."""
        result = validate_max_length("a" * (MAX_NAME_SIZE + 1), MAX_NAME_SIZE, "name")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NAME_TOO_LONG


@pytest.mark.unit
class TestValidatePassword:
    """Test validate_password function."""

    def test_missing(self):
        """Should report MISSING_PASS for an empty password."""
        result = validate_password("", PATTERN)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_PASS

    def test_weak(self):
        """Should report PASSWORD_FORMAT when the policy does not match."""
        result = validate_password("short", PATTERN)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PASSWORD_FORMAT

    def test_strong(self):
        """Should accept a password matching the policy."""
        assert validate_password("12345678", PATTERN) == Success(value="12345678")


@pytest.mark.unit
class TestValidateSearchTerms:
    """Test validate_search_terms function."""

    def test_no_terms(self):
        """Should report EMPTY_SEARCH_QUERY when nothing is supplied."""
        result = validate_search_terms({"name": "", "id": "", "identity": ""})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMPTY_SEARCH_QUERY

    def test_short_term(self):
        """Should report LEN_SEARCH_QUERY for a term below the minimum."""
        result = validate_search_terms({"name": "al", "id": "", "identity": ""})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.LEN_SEARCH_QUERY
        assert result.error.field == "name"

    def test_valid_term(self):
        """Should accept one long-enough term."""
        result = validate_search_terms({"name": "", "id": "", "identity": "alice"})

        assert isinstance(result, Success)
