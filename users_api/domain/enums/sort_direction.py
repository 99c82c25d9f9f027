"""Sort direction for list queries."""

from enum import Enum


class SortDirection(str, Enum):
    """Ordering direction of a page."""

    ASC = "asc"
    DESC = "desc"
