"""Request body decoder.

Checks the declared content type, then decodes the JSON body into a
Pydantic body schema. Structural rules (required fields, id format, password
policy) are left to the command's ``validate()``.

Usage:
    match await decode_json_body(request, ClientUpdateRequest):
        case Success(value=body):
            ...
        case Failure(error=error):
            ...  # 415 for a non-JSON content type, 400 for a bad body
"""

from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.requests import Request

from users_api.core.constants import JSON_CONTENT_TYPE
from users_api.core.enums import ErrorCode
from users_api.core.errors import UnsupportedMediaTypeError, ValidationError
from users_api.core.result import Failure, Result, Success

BodyT = TypeVar("BodyT", bound=BaseModel)
CommandT = TypeVar("CommandT")


def media_type(request: Request) -> str:
    """Return the request's media type without parameters, lowercased.

    ``application/json; charset=utf-8`` becomes ``application/json``.
    """
    content_type = request.headers.get("Content-Type", "")
    return content_type.split(";", 1)[0].strip().lower()


async def decode_json_body(
    request: Request,
    model: type[BodyT],
    *,
    require_content_type: bool = True,
) -> Result[BodyT, ValidationError]:
    """Decode a JSON request body into ``model``.

    Args:
        request: Incoming request.
        model: Pydantic schema of the body.
        require_content_type: When False, a request without a Content-Type
            header is decoded as JSON; a declared non-JSON type is still
            rejected.

    Returns:
        Success with the decoded body.
        Failure(UnsupportedMediaTypeError) when the content type is not JSON;
        the body is not read in that case.
        Failure(ValidationError MALFORMED_ENTITY) for malformed JSON or values
        of the wrong type.
    """
    declared = media_type(request)
    if declared != JSON_CONTENT_TYPE and (declared or require_content_type):
        return Failure(
            error=UnsupportedMediaTypeError(
                code=ErrorCode.UNSUPPORTED_MEDIA_TYPE,
                message=f"unsupported content type: {declared or 'none'}",
                content_type=declared,
            )
        )

    body = await request.body()
    try:
        return Success(value=model.model_validate_json(body))
    except PydanticValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(part) for part in first.get("loc", ()))
        message = first.get("msg", "malformed request body")
        return Failure(
            error=ValidationError(
                code=ErrorCode.MALFORMED_ENTITY,
                message=f"malformed request body: {loc + ': ' if loc else ''}{message}",
                field=loc or None,
            )
        )


async def decode_command(
    request: Request,
    model: type[BodyT],
    build: Callable[[BodyT], CommandT],
    *,
    require_content_type: bool = True,
) -> Result[CommandT, ValidationError]:
    """Decode a JSON body and build a command from it.

    Args:
        request: Incoming request.
        model: Pydantic schema of the body.
        build: Turns the decoded body into a command (adds path values).
        require_content_type: See decode_json_body.

    Returns:
        Success with the command, or the decoding Failure.
    """
    match await decode_json_body(
        request, model, require_content_type=require_content_type
    ):
        case Success(value=body):
            return Success(value=build(body))
        case Failure() as failure:
            return failure
