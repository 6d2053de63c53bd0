"""Infrastructure singletons: settings and logging."""

from functools import lru_cache

from crm_core.core.config import get_settings
from crm_core.core.enums import Environment
from crm_core.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["get_logger", "get_settings"]


@lru_cache
def get_logger() -> LoggerProtocol:
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from crm_core.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=level).bind(
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )
