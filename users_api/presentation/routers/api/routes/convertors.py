"""Path convertors for the route registry.

``segment`` matches one path segment that may be empty, so ``/users//tags``
reaches its handler and the missing id is reported as ``missing_id``
instead of a 404. Only ids in the middle of a path use it; a trailing empty
id would make ``/users/`` ambiguous with the collection routes.

Registration happens at import time and must precede route compilation,
which is why the generator imports this module.
"""

from starlette.convertors import Convertor, register_url_convertor

SEGMENT_CONVERTOR = "segment"


class SegmentConvertor(Convertor[str]):
    """A single path segment, possibly empty."""

    regex = "[^/]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor(SEGMENT_CONVERTOR, SegmentConvertor())
