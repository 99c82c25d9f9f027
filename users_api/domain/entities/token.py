"""Issued token pair."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Token:
    """Access/refresh token pair returned by the users service.

    Attributes:
        access_token: Short-lived bearer token.
        refresh_token: Token exchangeable for a new pair.
        access_type: Token type, typically ``Bearer``.
    """

    access_token: str
    refresh_token: str = ""
    access_type: str = "Bearer"
