"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry metadata.
These types define the structure of command and query registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Self-documenting - clear field names and docstrings
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from crm_core.core.config import Settings
from crm_core.core.validation import RuleSet

RuleSetFactory = Callable[[Settings], RuleSet]


class CQRSCategory(str, Enum):
    """Categories for CQRS commands and queries."""

    ENTITY = "entity"  # Valid for every family
    REFERENCE = "reference"  # Reference families only (ordering, defaults)


class ResultKind(str, Enum):
    """Shape of the value a successful request returns."""

    DTO = "dto"  # One projection DTO
    DTO_LIST = "dto_list"  # list of projection DTOs
    PAGED = "paged"  # PagedResult of projection DTOs
    BOOL = "bool"  # Plain flag (soft delete)


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., CreateEntity).
        handler_class: The handler class (e.g., CreateEntityHandler).
        category: Functional category for organization.
        rules: Builds the command's rule set from Settings.
        result_kind: Shape of the success value.
        description: Human-readable description for documentation.
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    rules: RuleSetFactory
    result_kind: ResultKind = ResultKind.DTO
    description: str = ""

    @property
    def request_class(self) -> type:
        return self.command_class


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Queries represent requests for data. They never change state.

    Attributes:
        query_class: The query dataclass (e.g., GetEntityById).
        handler_class: The handler class (e.g., GetEntityByIdHandler).
        category: Functional category for organization.
        rules: Builds the query's rule set from Settings.
        result_kind: Shape of the success value.
        is_paginated: Whether this query supports pagination.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    rules: RuleSetFactory
    result_kind: ResultKind = ResultKind.DTO
    is_paginated: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.is_paginated != (self.result_kind == ResultKind.PAGED):
            raise ValueError(
                f"Query {self.query_class.__name__} is_paginated={self.is_paginated} "
                f"does not match result_kind={self.result_kind.value}"
            )

    @property
    def request_class(self) -> type:
        return self.query_class


def get_handler_dependencies(handler_class: type) -> list[str]:
    """Extract dependency names from handler __init__ signature.

    Used by container auto-wiring to determine what dependencies
    to inject when creating handler instances.

    Args:
        handler_class: The handler class to inspect.

    Returns:
        List of dependency parameter names from __init__.

    Example:
        >>> get_handler_dependencies(GetEntityByIdHandler)
        ['repositories', 'mapper', 'logger']
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None:
        return []
    try:
        sig = inspect.signature(init_method)
    except (ValueError, TypeError):
        return []
    # Skip 'self' parameter
    return list(sig.parameters.keys())[1:]
