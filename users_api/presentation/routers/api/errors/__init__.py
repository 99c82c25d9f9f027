"""Error mapping and error response handling.

Exports:
    ErrorResponse: Error body schema
    ErrorResponseBuilder: Domain error to HTTP response mapper
    register_exception_handlers: Register exception handlers with FastAPI app
"""

from users_api.presentation.routers.api.errors.error_response import ErrorResponse
from users_api.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from users_api.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorResponse",
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
