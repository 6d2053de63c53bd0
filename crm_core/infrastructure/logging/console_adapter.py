"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/production: JSON renderer for machine parsing

The adapter does not inherit from LoggerProtocol (PEP 544 structural
subtyping); matching call signatures are enough.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


class ConsoleAdapter:
    """Console logger backed by a structlog bound logger.

    Args:
        use_json: JSON output when True, human-readable when False.
        level: Minimum level name (e.g. "INFO").
        stream: Output stream (defaults to stdout).
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        stream: TextIO | None = None,
    ) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]
        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        # Per-instance pipeline; structlog global configuration is untouched.
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=stream or sys.stdout),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping()[level.upper()]
            ),
            context_class=dict,
        )

    @classmethod
    def _from_bound(cls, bound: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message."""
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message: Message text.
            error: Optional exception instance.
            **context: Structured key-value context.
        """
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details.

        Args:
            message: Message text.
            error: Optional exception instance.
            **context: Structured key-value context.
        """
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        return ConsoleAdapter._from_bound(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context (alias for bind)."""
        return self.bind(**context)
