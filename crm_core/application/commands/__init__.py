"""Commands (CQRS write operations)."""

from crm_core.application.commands.entity_commands import (
    CreateEntity,
    DeleteEntity,
    UpdateEntity,
)

__all__ = ["CreateEntity", "DeleteEntity", "UpdateEntity"]
