"""Pytest configuration and shared fixtures.

Fixtures:
    session: Session returned by the stub authenticator for VALID_TOKEN
    authenticator: StubAuthenticator (records the tokens it was given)
    users_service / group_service: AsyncMock collaborators
    app / client: Application wired with the doubles above
"""

import re
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from users_api.core.enums import ErrorCode
from users_api.core.errors import AuthenticationError, DomainError
from users_api.core.result import Failure, Result, Success
from users_api.domain.entities import Client, ClientsPage, Credentials, Session
from users_api.main import create_app

VALID_TOKEN = "valid-token"
USER_ID = "c2f0e5d4-8f3b-4b8e-9d47-1f1a2b3c4d5e"
DOMAIN_ID = "7a0f4c3e-2d1b-4e5f-8a9b-0c1d2e3f4a5b"
PASSWORD_PATTERN = r"^.{8,}$"


# =============================================================================
# Test Doubles
# =============================================================================


class StubAuthenticator:
    """Authenticator that accepts only VALID_TOKEN."""

    def __init__(self, session: Session):
        self.session = session
        self.tokens: list[str] = []

    async def authenticate(self, token: str) -> Result[Session, DomainError]:
        """Return the session for VALID_TOKEN, an AuthenticationError otherwise."""
        self.tokens.append(token)
        if token == VALID_TOKEN:
            return Success(value=self.session)
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.AUTHENTICATION_FAILED,
                message="invalid token",
            )
        )


def make_client(**overrides) -> Client:
    """Helper to create a Client as the users service would return it."""
    values = {
        "id": USER_ID,
        "name": "alice",
        "tags": ["tag1"],
        "credentials": Credentials(identity="alice@example.com", secret="12345678"),
        "metadata": {"department": "sales"},
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
    }
    values.update(overrides)
    return Client(**values)


def make_page(*clients: Client) -> ClientsPage:
    """Helper to create a ClientsPage."""
    return ClientsPage(total=len(clients), offset=0, limit=10, clients=list(clients))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def session() -> Session:
    return Session(user_id=USER_ID, domain_id=DOMAIN_ID)


@pytest.fixture
def authenticator(session) -> StubAuthenticator:
    return StubAuthenticator(session)


@pytest.fixture
def users_service():
    return AsyncMock()


@pytest.fixture
def group_service():
    return AsyncMock()


@pytest.fixture
def app(users_service, group_service, authenticator):
    return create_app(
        users_service=users_service,
        group_service=group_service,
        authenticator=authenticator,
        password_pattern=PASSWORD_PATTERN,
        allow_self_register=True,
    )


@pytest.fixture
def client(app) -> TestClient:
    """TestClient that turns server exceptions into 500 responses."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def password_pattern() -> re.Pattern[str]:
    return re.compile(PASSWORD_PATTERN)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")
