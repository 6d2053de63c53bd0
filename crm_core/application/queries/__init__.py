"""Queries (CQRS read operations)."""

from crm_core.application.queries.entity_queries import (
    GetEntityById,
    ListEntities,
    ListEntitiesByDateRange,
    ListEntitiesByField,
    SearchEntities,
)
from crm_core.application.queries.reference_queries import (
    FindReferencesByLabel,
    GetByOrdinalPosition,
    GetDefaultReference,
    GetReferenceAtPosition,
)

__all__ = [
    "FindReferencesByLabel",
    "GetByOrdinalPosition",
    "GetDefaultReference",
    "GetEntityById",
    "GetReferenceAtPosition",
    "ListEntities",
    "ListEntitiesByDateRange",
    "ListEntitiesByField",
    "SearchEntities",
]
