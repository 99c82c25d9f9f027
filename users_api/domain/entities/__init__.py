"""Domain entities.

Pure data shapes with no framework dependencies.
"""

from users_api.domain.entities.client import Client, ClientsPage, Credentials
from users_api.domain.entities.session import Session
from users_api.domain.entities.token import Token

__all__ = [
    "Client",
    "ClientsPage",
    "Credentials",
    "Session",
    "Token",
]
