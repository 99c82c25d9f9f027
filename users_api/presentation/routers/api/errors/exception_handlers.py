"""Global exception handlers for the FastAPI application.

Request handling reports failures as Result values; the only exceptions left
are routing failures raised by Starlette (unknown path, method not allowed),
FastAPI request validation errors, and genuine bugs. These handlers give all
of them the same error body as every other failure.

Handlers:
    http_exception_handler: Converts Starlette HTTPException (404, 405, ...)
    validation_exception_handler: Converts RequestValidationError to 400
    generic_exception_handler: Catches all unhandled exceptions (500)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.core.container import get_logger
from users_api.core.enums import ErrorCode
from users_api.presentation.routers.api.errors.error_response import ErrorResponse

_CODE_BY_STATUS: dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION_FAILED,
    401: ErrorCode.AUTHENTICATION_FAILED,
    403: ErrorCode.AUTHORIZATION_FAILED,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    409: ErrorCode.RESOURCE_CONFLICT,
    415: ErrorCode.UNSUPPORTED_MEDIA_TYPE,
    503: ErrorCode.SERVICE_UNAVAILABLE,
}


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert an HTTPException to the error body.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by routing or a handler.

    Returns:
        JSONResponse with ErrorResponse content.

    Example:
        >>> # DELETE /users/ matches no delete route:
        >>> # 405 {"error": "method_not_allowed", "message": "Method Not Allowed", ...}
    """
    assert isinstance(exc, StarletteHTTPException)

    trace_id = getattr(request.state, "trace_id", None)
    code = _CODE_BY_STATUS.get(exc.status_code, ErrorCode.INTERNAL_ERROR)

    body = ErrorResponse(
        error=code.value,
        message=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        trace_id=trace_id,
    )

    # Preserve headers such as Allow on 405
    headers = getattr(exc, "headers", None)

    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 validation error body.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from FastAPI parameter validation.

    Returns:
        JSONResponse with ErrorResponse content.
    """
    assert isinstance(exc, RequestValidationError)

    trace_id = getattr(request.state, "trace_id", None)

    # First error is enough to tell the caller what to fix
    errors = exc.errors()
    if errors:
        loc = ".".join(str(part) for part in errors[0].get("loc", []))
        message = f"{loc}: {errors[0].get('msg', 'invalid value')}"
    else:
        message = "request validation failed"

    body = ErrorResponse(
        error=ErrorCode.VALIDATION_FAILED.value,
        message=message,
        instance=str(request.url.path),
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and answers 500 without leaking internal details.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with ErrorResponse content (500 Internal Server Error)
    """
    trace_id = getattr(request.state, "trace_id", None)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    body = ErrorResponse(
        error=ErrorCode.INTERNAL_ERROR.value,
        message="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    # Starlette's class so routing 404/405 are covered, not only FastAPI raises
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Catch-all for 500 errors
    app.add_exception_handler(Exception, generic_exception_handler)
