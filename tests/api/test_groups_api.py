"""API tests for group membership changes."""

import json

import pytest

from tests.conftest import DOMAIN_ID, USER_ID
from users_api.core.enums import ErrorCode
from users_api.core.errors import AuthorizationError
from users_api.core.result import Failure, Success

GROUP_ID = "3e4f5a6b-7c8d-4e9f-8a0b-1c2d3e4f5a6b"
CHILD_ID = "9f8e7d6c-5b4a-4392-8170-6f5e4d3c2b1a"
BASE = f"/{DOMAIN_ID}/groups/{GROUP_ID}"


@pytest.mark.api
class TestUserMembership:
    """Tests for .../users/assign and .../users/unassign."""

    def test_assign_users(self, client, auth_headers, group_service, session):
        """Should return 201 with an empty body."""
        # Arrange
        group_service.assign.return_value = Success(value=None)

        # Act
        response = client.post(
            f"{BASE}/users/assign",
            json={"relation": "viewer", "user_ids": [USER_ID]},
            headers=auth_headers,
        )

        # Assert
        assert response.status_code == 201
        assert response.content == b""
        group_service.assign.assert_awaited_once_with(
            session.in_domain(DOMAIN_ID), GROUP_ID, "viewer", "users", [USER_ID]
        )

    def test_unassign_users(self, client, auth_headers, group_service, session):
        """Should return 204."""
        group_service.unassign.return_value = Success(value=None)

        response = client.post(
            f"{BASE}/users/unassign",
            json={"relation": "viewer", "user_ids": [USER_ID]},
            headers=auth_headers,
        )

        assert response.status_code == 204
        group_service.unassign.assert_awaited_once_with(
            session.in_domain(DOMAIN_ID), GROUP_ID, "viewer", "users", [USER_ID]
        )
        group_service.assign.assert_not_called()

    @pytest.mark.parametrize(
        ("body", "code"),
        [
            ({"user_ids": [USER_ID]}, ErrorCode.MISSING_RELATION),
            ({"relation": "viewer", "user_ids": []}, ErrorCode.EMPTY_LIST),
        ],
    )
    def test_assign_users_invalid(self, client, auth_headers, group_service, body, code):
        """Should validate relation and member list."""
        response = client.post(f"{BASE}/users/assign", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"] == code.value
        group_service.assign.assert_not_called()

    def test_assign_users_blank_group(self, client, auth_headers):
        """Should return 400 missing_id for a blank group id."""
        response = client.post(
            f"/{DOMAIN_ID}/groups/%20/users/assign",
            json={"relation": "viewer", "user_ids": [USER_ID]},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == ErrorCode.MISSING_ID.value

    def test_assign_users_forbidden(self, client, auth_headers, group_service):
        """Should pass the service's authorization failure through as 403."""
        group_service.assign.return_value = Failure(
            error=AuthorizationError(
                code=ErrorCode.AUTHORIZATION_FAILED,
                message="not allowed",
            )
        )

        response = client.post(
            f"{BASE}/users/assign",
            json={"relation": "viewer", "user_ids": [USER_ID]},
            headers=auth_headers,
        )

        assert response.status_code == 403

    def test_assign_users_wrong_content_type(self, client, group_service):
        """Should return 415 before checking the token."""
        response = client.post(
            f"{BASE}/users/assign",
            content="relation=viewer",
            headers={"Content-Type": "text/plain"},
        )

        assert response.status_code == 415
        group_service.assign.assert_not_called()


@pytest.mark.api
class TestGroupMembership:
    """Tests for .../groups/assign and .../groups/unassign."""

    def test_assign_groups(self, client, auth_headers, group_service, session):
        """Should assign child groups with the parent relation."""
        group_service.assign.return_value = Success(value=None)

        response = client.post(
            f"{BASE}/groups/assign",
            json={"group_ids": [CHILD_ID]},
            headers=auth_headers,
        )

        assert response.status_code == 201
        group_service.assign.assert_awaited_once_with(
            session.in_domain(DOMAIN_ID), GROUP_ID, "parent_group", "groups", [CHILD_ID]
        )

    def test_unassign_groups(self, client, auth_headers, group_service):
        """Should return 204."""
        group_service.unassign.return_value = Success(value=None)

        response = client.post(
            f"{BASE}/groups/unassign",
            json={"group_ids": [CHILD_ID]},
            headers=auth_headers,
        )

        assert response.status_code == 204

    def test_assign_groups_empty(self, client, auth_headers, group_service):
        """Should return 400 empty_list without group ids."""
        response = client.post(
            f"{BASE}/groups/assign", json={"group_ids": []}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["error"] == ErrorCode.EMPTY_LIST.value
        group_service.assign.assert_not_called()


@pytest.mark.api
class TestMembershipWithoutContentType:
    """Membership bodies are read as JSON when no Content-Type is sent."""

    @pytest.mark.parametrize(
        ("path", "body", "method_name", "status_code"),
        [
            ("users/assign", {"relation": "viewer", "user_ids": [USER_ID]}, "assign", 201),
            ("users/unassign", {"relation": "viewer", "user_ids": [USER_ID]}, "unassign", 204),
            ("groups/assign", {"group_ids": [CHILD_ID]}, "assign", 201),
            ("groups/unassign", {"group_ids": [CHILD_ID]}, "unassign", 204),
        ],
    )
    def test_missing_content_type_accepted(
        self, client, auth_headers, group_service, path, body, method_name, status_code
    ):
        """Should decode the body and call the group service."""
        # Arrange
        getattr(group_service, method_name).return_value = Success(value=None)

        # Act
        response = client.post(
            f"{BASE}/{path}", content=json.dumps(body), headers=auth_headers
        )

        # Assert
        assert "content-type" not in response.request.headers
        assert response.status_code == status_code
        getattr(group_service, method_name).assert_awaited_once()

    def test_missing_content_type_without_token(self, client, group_service):
        """Should return 401 bearer_token, not 415."""
        response = client.post(
            f"{BASE}/users/assign",
            content=json.dumps({"relation": "viewer", "user_ids": [USER_ID]}),
        )

        assert response.status_code == 401
        assert response.json()["error"] == ErrorCode.BEARER_TOKEN.value
        group_service.assign.assert_not_called()

    def test_missing_content_type_invalid_body(self, client, auth_headers, group_service):
        """Should still validate the decoded body."""
        response = client.post(
            f"{BASE}/users/assign",
            content=json.dumps({"relation": "viewer", "user_ids": []}),
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == ErrorCode.EMPTY_LIST.value
        group_service.assign.assert_not_called()
