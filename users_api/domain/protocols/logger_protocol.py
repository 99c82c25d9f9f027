"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging: every call is a fixed message plus
key-value context. Implementations MUST keep logs structured and MUST NOT
log secrets.

Security:
    - NEVER log passwords, bearer tokens, refresh tokens or reset tokens
    - Log identifiers (user id, domain id, trace id), not request bodies

Usage:
    from users_api.core.container import get_logger

    logger = get_logger()
    logger.warning("request_failed", operation="view_client", error_code="missing_id")

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("client_registered")  # trace_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            LoggerProtocol: New logger instance with bound context.
        """
        ...
