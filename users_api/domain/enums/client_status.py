"""Client lifecycle status.

Usage:
    from users_api.domain.enums import ClientStatus

    if ClientStatus.is_valid(raw):
        status = ClientStatus(raw)
"""

from enum import Enum


class ClientStatus(str, Enum):
    """Lifecycle status of a client (user).

    ALL is a wildcard accepted only as a list filter; it is never a status a
    client can be created with.
    """

    ENABLED = "enabled"
    """Client can authenticate and is listed by default."""

    DISABLED = "disabled"
    """Client exists but cannot authenticate."""

    DELETED = "deleted"
    """Client is soft-deleted."""

    ALL = "all"
    """List filter matching every status."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a known status.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a known status.
        """
        return value in cls.values()
