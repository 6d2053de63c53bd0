"""CQRS registry and dispatch.

Exports:
    COMMAND_REGISTRY, QUERY_REGISTRY: Every request with its handler and rules
    Dispatcher: Validate-then-handle entry point
"""

from crm_core.application.cqrs.computed_views import (
    get_all_commands,
    get_all_handler_classes,
    get_all_queries,
    get_command_metadata,
    get_paginated_queries,
    get_queries_by_category,
    get_query_metadata,
    get_request_metadata,
    get_statistics,
    validate_registry_consistency,
)
from crm_core.application.cqrs.dispatcher import Dispatcher
from crm_core.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
    ResultKind,
    get_handler_dependencies,
)
from crm_core.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

__all__ = [
    # Registries
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    # Metadata
    "CQRSCategory",
    "CommandMetadata",
    "QueryMetadata",
    "ResultKind",
    # Dispatch
    "Dispatcher",
    # Helpers
    "get_all_commands",
    "get_all_handler_classes",
    "get_all_queries",
    "get_command_metadata",
    "get_handler_dependencies",
    "get_paginated_queries",
    "get_queries_by_category",
    "get_query_metadata",
    "get_request_metadata",
    "get_statistics",
    "validate_registry_consistency",
]
