"""Remote authenticator over HTTP.

Implements AuthenticatorProtocol by asking the authentication service to
resolve a bearer token:

    POST {base_url}/authenticate
    Authorization: Bearer <token>

    200 {"user_id": "...", "domain_id": "...", "domain_user_id": "...",
         "super_admin": false}

Architecture:
    - Infrastructure layer (adapter for an external API)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for expected failures)
"""

import httpx
import structlog

from users_api.core.enums import ErrorCode
from users_api.core.errors import AuthenticationError, DomainError, InternalError
from users_api.core.result import Failure, Result, Success
from users_api.domain.entities import Session


class HttpAuthenticator:
    """Authenticator backed by the remote authentication service.

    Attributes:
        _base_url: Service base URL (without trailing slash).
        _timeout: HTTP request timeout in seconds.
        _transport: Optional httpx transport (tests pass a MockTransport).

    Example:
        >>> authenticator = HttpAuthenticator(base_url="http://auth:9001")
        >>> result = await authenticator.authenticate(token)
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the authenticator.

        Args:
            base_url: Authentication service base URL.
            timeout: HTTP request timeout in seconds.
            transport: Optional httpx transport override.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._logger = structlog.get_logger("auth_api")

    async def authenticate(self, token: str) -> Result[Session, DomainError]:
        """Resolve a bearer token into a Session.

        Args:
            token: Non-empty bearer token.

        Returns:
            Success(Session) when the service accepts the token.
            Failure(AuthenticationError) on 401/403.
            Failure(InternalError) on timeouts, connection errors or bad payloads.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{self._base_url}/authenticate",
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.TimeoutException as e:
            self._logger.warning("auth_api_timeout", error=str(e))
            return Failure(
                error=InternalError(
                    code=ErrorCode.SERVICE_UNAVAILABLE,
                    message="authentication service timed out",
                )
            )
        except httpx.RequestError as e:
            self._logger.warning("auth_api_connection_error", error=str(e))
            return Failure(
                error=InternalError(
                    code=ErrorCode.SERVICE_UNAVAILABLE,
                    message=f"failed to connect to authentication service: {e}",
                )
            )

        if response.status_code in (401, 403):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message="invalid or expired token",
                )
            )

        if response.status_code != 200:
            self._logger.warning(
                "auth_api_unexpected_status",
                status_code=response.status_code,
            )
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=(
                        "authentication service returned "
                        f"status {response.status_code}"
                    ),
                )
            )

        return self._parse_session(response)

    def _parse_session(self, response: httpx.Response) -> Result[Session, DomainError]:
        """Build a Session from a 200 response body."""
        try:
            payload = response.json()
            user_id = str(payload["user_id"])
        except (ValueError, KeyError, TypeError) as e:
            self._logger.warning("auth_api_invalid_response", error=str(e))
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="authentication service returned an invalid session",
                )
            )

        return Success(
            value=Session(
                user_id=user_id,
                domain_id=str(payload.get("domain_id") or ""),
                domain_user_id=str(payload.get("domain_user_id") or ""),
                super_admin=bool(payload.get("super_admin", False)),
            )
        )
