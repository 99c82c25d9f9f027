"""Authentication adapters."""

from users_api.infrastructure.authn.http_authenticator import HttpAuthenticator

__all__ = ["HttpAuthenticator"]
