"""Common schemas shared by every request body.

Provides the RequestBody base: a JSON ``null`` is read as an absent field,
so ``{"tags": null}`` decodes like ``{}`` and the field's default applies.
Missing values are then reported by the command's ``validate()``.
"""

from typing import Any

from pydantic import BaseModel, model_validator


class RequestBody(BaseModel):
    """Base for request body schemas.

    Example:
        >>> class TagsBody(RequestBody):
        ...     tags: list[str] = []
        >>> TagsBody.model_validate_json('{"tags": null}')
        TagsBody(tags=[])
    """

    @model_validator(mode="before")
    @classmethod
    def null_as_absent(cls, data: Any) -> Any:
        """Drop top-level ``null`` values so field defaults apply."""
        if not isinstance(data, dict):
            return data
        return {key: value for key, value in data.items() if value is not None}
