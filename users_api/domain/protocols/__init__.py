"""Domain protocols (ports).

Infrastructure adapters and external services implement these protocols
without inheritance (PEP 544 structural subtyping).

Usage:
    from users_api.domain.protocols import UsersServiceProtocol
"""

from users_api.domain.protocols.authenticator_protocol import AuthenticatorProtocol
from users_api.domain.protocols.group_service_protocol import GroupServiceProtocol
from users_api.domain.protocols.logger_protocol import LoggerProtocol
from users_api.domain.protocols.users_service_protocol import UsersServiceProtocol

__all__ = [
    "AuthenticatorProtocol",
    "GroupServiceProtocol",
    "LoggerProtocol",
    "UsersServiceProtocol",
]
