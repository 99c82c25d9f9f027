"""Error response body.

Every failed request, whatever step it failed in, answers with this body.

Exports:
    ErrorResponse: Error body schema
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Structured error body.

    Attributes:
        error: Short machine-readable code (an ErrorCode value)
        message: Human-readable explanation of this occurrence
        instance: Request path the error occurred on
        trace_id: Request trace ID for debugging

    Examples:
        >>> ErrorResponse(
        ...     error="missing_id",
        ...     message="missing entity id",
        ...     instance="/users/%20",
        ... )
    """

    error: str = Field(
        ...,
        description="Machine-readable error code",
        examples=["invalid_query_params"],
    )
    message: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["duplicate query parameter: limit"],
    )
    instance: str | None = Field(
        None,
        description="Request path",
        examples=["/users"],
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
