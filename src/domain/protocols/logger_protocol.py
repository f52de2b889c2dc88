"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging for the handler dispatch layer
while remaining backend-agnostic. Implementations MUST emit structured
records (message + key-value context).

Log Levels (standard 5-level hierarchy):
    - DEBUG: Handler resolution details
    - INFO: Normal operational events (registrations, dispatch)
    - WARNING: A handler returned a failed Result
    - ERROR: A handler raised instead of returning a Result
    - CRITICAL: System-wide failure

Context Binding:
    Use bind() or with_context() to create scoped loggers with permanent
    context (request type, trace id) automatically included in all logs.

Usage:
    from src.core.container import get_logger
    from src.domain.protocols.logger_protocol import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.info("Handler registered", request="CreateUser")

    scoped = logger.bind(request="CreateUser")
    scoped.warning("Request failed", error_code="Error-Validation")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    Implementations may enrich logs with timestamp and level.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
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

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
