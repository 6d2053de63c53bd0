"""Domain protocols (ports) implemented by infrastructure adapters."""

from crm_core.domain.protocols.logger_protocol import LoggerProtocol
from crm_core.domain.protocols.repository import (
    EntityRepository,
    ReferenceRepository,
)

__all__ = [
    "EntityRepository",
    "LoggerProtocol",
    "ReferenceRepository",
]
