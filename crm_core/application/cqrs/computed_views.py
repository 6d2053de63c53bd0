"""CQRS Registry Computed Views and Helper Functions.

Utility functions for introspecting the CQRS registry.
Used by the dispatcher, container auto-wiring and tests.
"""

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crm_core.application.cqrs.metadata import (
        CommandMetadata,
        CQRSCategory,
        QueryMetadata,
    )


def get_all_commands() -> list[type]:
    """Get all registered command classes."""
    from crm_core.application.cqrs.registry import COMMAND_REGISTRY

    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    """Get all registered query classes."""
    from crm_core.application.cqrs.registry import QUERY_REGISTRY

    return [meta.query_class for meta in QUERY_REGISTRY]


def get_queries_by_category(category: "CQRSCategory") -> list["QueryMetadata"]:
    """Get query metadata filtered by category.

    Args:
        category: The category to filter by.

    Returns:
        List of QueryMetadata for queries in that category.
    """
    from crm_core.application.cqrs.registry import QUERY_REGISTRY

    return [meta for meta in QUERY_REGISTRY if meta.category == category]


def get_command_metadata(command_class: type) -> "CommandMetadata | None":
    """Get metadata for a specific command class.

    Args:
        command_class: The command class to look up.

    Returns:
        CommandMetadata if found, None otherwise.
    """
    from crm_core.application.cqrs.registry import COMMAND_REGISTRY

    for meta in COMMAND_REGISTRY:
        if meta.command_class is command_class:
            return meta
    return None


def get_query_metadata(query_class: type) -> "QueryMetadata | None":
    """Get metadata for a specific query class.

    Args:
        query_class: The query class to look up.

    Returns:
        QueryMetadata if found, None otherwise.
    """
    from crm_core.application.cqrs.registry import QUERY_REGISTRY

    for meta in QUERY_REGISTRY:
        if meta.query_class is query_class:
            return meta
    return None


def get_request_metadata(
    request_class: type,
) -> "CommandMetadata | QueryMetadata | None":
    """Get metadata for a command or query class."""
    return get_command_metadata(request_class) or get_query_metadata(request_class)


def get_paginated_queries() -> list["QueryMetadata"]:
    """Get queries that return a PagedResult."""
    from crm_core.application.cqrs.registry import QUERY_REGISTRY

    return [meta for meta in QUERY_REGISTRY if meta.is_paginated]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics for documentation and monitoring.

    Returns:
        Dict with counts by category, result kind, etc.
    """
    from crm_core.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    return {
        "total_commands": len(COMMAND_REGISTRY),
        "total_queries": len(QUERY_REGISTRY),
        "total_operations": len(COMMAND_REGISTRY) + len(QUERY_REGISTRY),
        "queries_by_category": dict(
            Counter(meta.category.value for meta in QUERY_REGISTRY)
        ),
        "results_by_kind": dict(
            Counter(
                meta.result_kind.value
                for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]
            )
        ),
        "paginated_queries": sum(1 for meta in QUERY_REGISTRY if meta.is_paginated),
    }


def get_all_handler_classes() -> list[type]:
    """Get all registered handler classes (commands + queries)."""
    from crm_core.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    handlers: list[type] = []
    for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]:
        if meta.handler_class not in handlers:
            handlers.append(meta.handler_class)
    return handlers


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Returns:
        List of error messages. Empty if registry is consistent.
    """
    from crm_core.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    errors: list[str] = []

    entries = [*COMMAND_REGISTRY, *QUERY_REGISTRY]
    request_classes = [meta.request_class for meta in entries]
    if len(request_classes) != len(set(request_classes)):
        errors.append("Duplicate request classes in CQRS registry")

    for meta in entries:
        handler_name = meta.handler_class.__name__
        if not hasattr(meta.handler_class, "handle"):
            errors.append(f"Handler {handler_name} missing handle() method")
        if handler_name != f"{meta.request_class.__name__}Handler":
            errors.append(
                f"Handler {handler_name} does not match request "
                f"{meta.request_class.__name__}"
            )
        if not callable(meta.rules):
            errors.append(f"{meta.request_class.__name__} has no rule set factory")

    return errors
