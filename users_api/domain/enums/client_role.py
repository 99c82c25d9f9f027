"""Client roles.

The users service decides what each role may do; this service only checks
that a requested role is one it knows.
"""

from enum import Enum


class ClientRole(str, Enum):
    """Platform-wide role of a client."""

    USER = "user"
    """Regular client."""

    ADMIN = "admin"
    """Platform administrator."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['user', 'admin'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
