"""Command handlers."""

from crm_core.application.commands.handlers.create_entity_handler import (
    CreateEntityHandler,
)
from crm_core.application.commands.handlers.delete_entity_handler import (
    DeleteEntityHandler,
)
from crm_core.application.commands.handlers.update_entity_handler import (
    UpdateEntityHandler,
)

__all__ = ["CreateEntityHandler", "DeleteEntityHandler", "UpdateEntityHandler"]
