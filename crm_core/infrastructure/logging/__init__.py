"""Logging adapters implementing LoggerProtocol."""

from crm_core.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
