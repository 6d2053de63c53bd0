"""Handler wiring: mapper, handler factory and dispatcher.

Handlers are request-scoped (built per dispatch); their dependencies are
app-scoped singletons resolved by ``__init__`` parameter name.
"""

from collections.abc import Callable
from functools import lru_cache
from typing import Any

from crm_core.application.cqrs.dispatcher import Dispatcher
from crm_core.application.cqrs.metadata import get_handler_dependencies
from crm_core.application.mapping.entity_mapper import EntityMapper
from crm_core.core.container.infrastructure import get_logger, get_settings
from crm_core.core.container.repositories import get_repository_registry


@lru_cache
def get_mapper() -> EntityMapper:
    """Return the app-scoped entity mapper."""
    return EntityMapper(get_repository_registry())


# Handler __init__ parameter name -> container factory
DEPENDENCY_FACTORIES: dict[str, Callable[[], Any]] = {
    "repositories": get_repository_registry,
    "mapper": get_mapper,
    "logger": get_logger,
    "settings": get_settings,
}


def create_handler[H](handler_class: type[H], **overrides: Any) -> H:
    """Create handler instance with auto-wired dependencies.

    Args:
        handler_class: Handler class to instantiate.
        **overrides: Explicit dependency overrides (by parameter name).

    Returns:
        Handler instance with injected dependencies.

    Raises:
        ValueError: If a dependency cannot be resolved.
    """
    kwargs: dict[str, Any] = {}
    for name in get_handler_dependencies(handler_class):
        if name in overrides:
            kwargs[name] = overrides[name]
        elif name in DEPENDENCY_FACTORIES:
            kwargs[name] = DEPENDENCY_FACTORIES[name]()
        else:
            raise ValueError(
                f"Cannot resolve dependency '{name}' for {handler_class.__name__}"
            )
    return handler_class(**kwargs)


@lru_cache
def get_dispatcher() -> Dispatcher:
    """Return the app-scoped dispatcher wired to the container."""
    return Dispatcher(
        handler_factory=create_handler,
        settings=get_settings(),
        logger=get_logger(),
    )
