"""LoggerProtocol definition for structured logging.

Handlers depend on this protocol, never on a logging backend. Implementations
MUST emit structured records (message + key-value context).

Log Levels:
    - DEBUG: Request routing, repository round-trips
    - INFO: Request handled successfully
    - WARNING: Expected failures (not found, conflicts, validation)
    - ERROR: Unexpected exception inside a handler (re-raised afterwards)
    - CRITICAL: Composition root cannot be built

Context Binding:
    Handlers call bind(handler=..., family=...) once and log through the
    bound instance, so every record carries the family it concerns.

Usage:
    from crm_core.core.container import get_logger
    from crm_core.domain.protocols import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    scoped = logger.bind(handler="GetEntityByIdHandler", family="account_type")
    scoped.info("Entity retrieved", entity_id=str(entity_id))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: constant message plus key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original instance is left unchanged.

        Args:
            **context: Context to include in all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
