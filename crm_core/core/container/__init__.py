"""Container module - Centralized dependency injection.

The composition root: builds the app-scoped singletons and wires handlers.

    from crm_core.core.container import get_dispatcher

    dispatcher = get_dispatcher()
    result = await dispatcher.dispatch(GetDefaultReference(family="call_type"))

The container is organized into modules:
- infrastructure: Settings and logging
- repositories: Repository registry (one repository per family)
- handlers: Mapper, handler factory and dispatcher
"""

from crm_core.core.container.handlers import (
    DEPENDENCY_FACTORIES,
    create_handler,
    get_dispatcher,
    get_mapper,
)
from crm_core.core.container.infrastructure import get_logger, get_settings
from crm_core.core.container.repositories import get_repository_registry

__all__ = [
    "DEPENDENCY_FACTORIES",
    "create_handler",
    "get_dispatcher",
    "get_logger",
    "get_mapper",
    "get_repository_registry",
    "get_settings",
]
