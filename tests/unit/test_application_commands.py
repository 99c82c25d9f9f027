"""Unit tests for command and query validation.

Each command's validate() checks structure only and reports the first
failing rule with a precise error code.
"""

import re

import pytest

from users_api.application.commands import (
    GROUPS_MEMBER_KIND,
    PARENT_GROUP_RELATION,
    ChangeClientStatus,
    GroupRelation,
    IssueToken,
    RegisterClient,
    ResetSecret,
    ResetSecretRequest,
    UpdateClientIdentity,
    UpdateClientRole,
    UpdateClientSecret,
    UpdateClientTags,
)
from users_api.application.queries import ListMembers, SearchClients, ViewClient
from users_api.core.constants import MAX_NAME_SIZE
from users_api.core.enums import ErrorCode
from users_api.core.result import Failure, Success
from users_api.domain.enums import ClientRole, ClientStatus, MemberScope
from users_api.domain.value_objects import PageQuery

PATTERN = re.compile(r"^.{8,}$")
VALID_UUID = "c2f0e5d4-8f3b-4b8e-9d47-1f1a2b3c4d5e"


def _register(**overrides) -> RegisterClient:
    values = {
        "name": "alice",
        "identity": "alice@example.com",
        "secret": "12345678",
        "password_pattern": PATTERN,
    }
    values.update(overrides)
    return RegisterClient(**values)


def _code(result):
    assert isinstance(result, Failure)
    return result.error.code


@pytest.mark.unit
class TestRegisterClient:
    """Test RegisterClient.validate and to_client."""

    def test_valid(self):
        """Should accept a minimal valid registration."""
        assert _register().validate() == Success(value=None)

    def test_valid_with_uuid_id(self):
        """Should accept a caller-chosen UUID."""
        assert isinstance(_register(id=VALID_UUID).validate(), Success)

    def test_invalid_id(self):
        """Should report INVALID_ID for a non-UUID id."""
        assert _code(_register(id="not-a-uuid").validate()) == ErrorCode.INVALID_ID

    def test_name_too_long(self):
        """Should report NAME_TOO_LONG past MAX_NAME_SIZE."""
        result = _register(name="a" * (MAX_NAME_SIZE + 1)).validate()

        assert _code(result) == ErrorCode.NAME_TOO_LONG

    def test_missing_identity(self):
        """Should report MISSING_IDENTITY without an identity."""
        assert _code(_register(identity="").validate()) == ErrorCode.MISSING_IDENTITY

    def test_missing_secret(self):
        """Should report MISSING_PASS without a secret."""
        assert _code(_register(secret="").validate()) == ErrorCode.MISSING_PASS

    def test_weak_secret(self):
        """Should report PASSWORD_FORMAT for a secret failing the policy."""
        assert _code(_register(secret="1234").validate()) == ErrorCode.PASSWORD_FORMAT

    @pytest.mark.parametrize("status", ["all", "unknown"])
    def test_invalid_status(self, status):
        """Should reject "all" and unknown statuses on create."""
        assert _code(_register(status=status).validate()) == ErrorCode.INVALID_STATUS

    def test_invalid_role(self):
        """Should report INVALID_ROLE for an unknown role."""
        assert _code(_register(role="root").validate()) == ErrorCode.INVALID_ROLE

    def test_to_client(self):
        """Should build the client entity with enums and credentials."""
        client = _register(tags=["a"], role="admin").to_client()

        assert client.name == "alice"
        assert client.tags == ["a"]
        assert client.credentials.identity == "alice@example.com"
        assert client.credentials.secret == "12345678"
        assert client.status == ClientStatus.ENABLED
        assert client.role == ClientRole.ADMIN


@pytest.mark.unit
class TestClientUpdates:
    """Test update commands."""

    def test_tags_missing_id(self):
        """Should report MISSING_ID for a blank path id."""
        result = UpdateClientTags(client_id=" ", tags=["a"]).validate()

        assert _code(result) == ErrorCode.MISSING_ID

    def test_tags_to_client_keeps_order(self):
        """Should carry the tags in request order."""
        client = UpdateClientTags(client_id="id", tags=["b", "a"]).to_client()

        assert client.tags == ["b", "a"]

    def test_identity_missing(self):
        """Should report MISSING_IDENTITY for an empty identity."""
        result = UpdateClientIdentity(client_id="id", identity="").validate()

        assert _code(result) == ErrorCode.MISSING_IDENTITY

    def test_role_invalid(self):
        """Should report INVALID_ROLE for an unknown role."""
        result = UpdateClientRole(client_id="id", role="invalid").validate()

        assert _code(result) == ErrorCode.INVALID_ROLE

    def test_role_valid(self):
        """Should accept a known role."""
        assert UpdateClientRole(client_id="id", role="admin").validate() == Success(
            value=None
        )

    def test_status_missing_id(self):
        """Should report MISSING_ID for an empty path id."""
        result = ChangeClientStatus(client_id="", enable=True).validate()

        assert _code(result) == ErrorCode.MISSING_ID

    @pytest.mark.parametrize(
        ("old", "new", "code"),
        [
            ("", "12345678", ErrorCode.MISSING_PASS),
            ("12345678", "", ErrorCode.MISSING_PASS),
            ("12345678", "123", ErrorCode.PASSWORD_FORMAT),
        ],
    )
    def test_secret_failures(self, old, new, code):
        """Should require both secrets and a policy-compliant new secret."""
        command = UpdateClientSecret(
            old_secret=old, new_secret=new, password_pattern=PATTERN
        )

        assert _code(command.validate()) == code


@pytest.mark.unit
class TestPasswordCommands:
    """Test password reset commands."""

    def test_reset_request_missing_email(self):
        """Should report MISSING_EMAIL first."""
        result = ResetSecretRequest(email="", host="").validate()

        assert _code(result) == ErrorCode.MISSING_EMAIL

    def test_reset_request_missing_host(self):
        """Should report MISSING_HOST without a Referer."""
        result = ResetSecretRequest(email="a@example.com", host="").validate()

        assert _code(result) == ErrorCode.MISSING_HOST

    def test_reset_mismatch(self):
        """Should report PASSWORD_MISMATCH when the confirmation differs."""
        command = ResetSecret(
            token="t",
            password="12345678",
            confirm_password="87654321",
            password_pattern=PATTERN,
        )

        assert _code(command.validate()) == ErrorCode.PASSWORD_MISMATCH

    def test_reset_missing_password(self):
        """Should report MISSING_PASS for an empty password."""
        command = ResetSecret(token="t", password="", password_pattern=PATTERN)

        assert _code(command.validate()) == ErrorCode.MISSING_PASS

    def test_reset_weak_password(self):
        """Should report PASSWORD_FORMAT for a weak but confirmed password."""
        command = ResetSecret(
            token="t", password="123", confirm_password="123", password_pattern=PATTERN
        )

        assert _code(command.validate()) == ErrorCode.PASSWORD_FORMAT


@pytest.mark.unit
class TestTokenCommands:
    """Test IssueToken validation."""

    @pytest.mark.parametrize(
        ("identity", "secret", "domain_id", "code"),
        [
            ("", "12345678", "d", ErrorCode.MISSING_IDENTITY),
            ("alice", "", "d", ErrorCode.MISSING_PASS),
            ("alice", "12345678", "", ErrorCode.MISSING_ID),
        ],
    )
    def test_issue_failures(self, identity, secret, domain_id, code):
        """Should report the first missing field."""
        command = IssueToken(identity=identity, secret=secret, domain_id=domain_id)

        assert _code(command.validate()) == code


@pytest.mark.unit
class TestGroupRelation:
    """Test GroupRelation validation."""

    def test_missing_relation(self):
        """Should report MISSING_RELATION for users without a relation."""
        command = GroupRelation(
            domain_id="d", group_id="g", relation="", member_ids=["u1"]
        )

        assert _code(command.validate()) == ErrorCode.MISSING_RELATION

    def test_empty_members(self):
        """Should report EMPTY_LIST without members."""
        command = GroupRelation(
            domain_id="d",
            group_id="g",
            relation=PARENT_GROUP_RELATION,
            member_kind=GROUPS_MEMBER_KIND,
            member_ids=[],
        )

        result = command.validate()

        assert _code(result) == ErrorCode.EMPTY_LIST
        assert result.error.field == "group_ids"

    def test_missing_group_id(self):
        """Should report MISSING_ID for a blank group id."""
        command = GroupRelation(
            domain_id="d", group_id="", relation="viewer", member_ids=["u1"]
        )

        assert _code(command.validate()) == ErrorCode.MISSING_ID


@pytest.mark.unit
class TestQueries:
    """Test query validation."""

    def test_view_missing_id(self):
        """Should report MISSING_ID for an empty id."""
        assert _code(ViewClient(client_id="").validate()) == ErrorCode.MISSING_ID

    def test_search_requires_term(self):
        """Should report EMPTY_SEARCH_QUERY without any term."""
        assert _code(SearchClients().validate()) == ErrorCode.EMPTY_SEARCH_QUERY

    def test_search_with_identity(self):
        """Should accept a search by identity alone."""
        query = SearchClients(page=PageQuery(identity="alice@example.com"))

        assert query.validate() == Success(value=None)

    def test_members_missing_scope_id(self):
        """Should report MISSING_ID naming the scope's id field."""
        query = ListMembers(domain_id="d", scope=MemberScope.CHANNELS, scope_id=" ")

        result = query.validate()

        assert _code(result) == ErrorCode.MISSING_ID
        assert result.error.field == "channel_id"
