"""CQRS Registry - Single Source of Truth for Commands and Queries.

This registry catalogs ALL commands and queries with their metadata.
Used for:
- Dispatch (request class -> handler class + rule set)
- Container auto-wiring of handler dependencies
- Validation tests (verify no drift between requests/handlers)

Adding new commands/queries:
1. Define the request dataclass in queries/ or commands/
2. Create its handler class in the matching handlers/ directory
3. Add a rule set factory in validators/request_rules.py
4. Add an entry to COMMAND_REGISTRY or QUERY_REGISTRY below
5. Run tests - they'll tell you what's missing
"""

from crm_core.application.commands.entity_commands import (
    CreateEntity,
    DeleteEntity,
    UpdateEntity,
)
from crm_core.application.commands.handlers import (
    CreateEntityHandler,
    DeleteEntityHandler,
    UpdateEntityHandler,
)
from crm_core.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
    ResultKind,
)
from crm_core.application.queries.entity_queries import (
    GetEntityById,
    ListEntities,
    ListEntitiesByDateRange,
    ListEntitiesByField,
    SearchEntities,
)
from crm_core.application.queries.handlers import (
    FindReferencesByLabelHandler,
    GetByOrdinalPositionHandler,
    GetDefaultReferenceHandler,
    GetEntityByIdHandler,
    GetReferenceAtPositionHandler,
    ListEntitiesByDateRangeHandler,
    ListEntitiesByFieldHandler,
    ListEntitiesHandler,
    SearchEntitiesHandler,
)
from crm_core.application.queries.reference_queries import (
    FindReferencesByLabel,
    GetByOrdinalPosition,
    GetDefaultReference,
    GetReferenceAtPosition,
)
from crm_core.application.validators import request_rules

# ═══════════════════════════════════════════════════════════════════════════
# Command Registry
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=CreateEntity,
        handler_class=CreateEntityHandler,
        category=CQRSCategory.ENTITY,
        rules=request_rules.create_entity_rules,
        result_kind=ResultKind.DTO,
        description="Create an entity and return its details",
    ),
    CommandMetadata(
        command_class=UpdateEntity,
        handler_class=UpdateEntityHandler,
        category=CQRSCategory.ENTITY,
        rules=request_rules.update_entity_rules,
        result_kind=ResultKind.DTO,
        description="Change an active entity under optimistic concurrency",
    ),
    CommandMetadata(
        command_class=DeleteEntity,
        handler_class=DeleteEntityHandler,
        category=CQRSCategory.ENTITY,
        rules=request_rules.delete_entity_rules,
        result_kind=ResultKind.BOOL,
        description="Soft-delete an entity (False when already deleted)",
    ),
]

# ═══════════════════════════════════════════════════════════════════════════
# Query Registry
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    # ═══════════════════════════════════════════════════════════════════════
    # Entity Queries (5 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetEntityById,
        handler_class=GetEntityByIdHandler,
        category=CQRSCategory.ENTITY,
        rules=request_rules.get_entity_by_id_rules,
        description="Get one entity by ID, including soft-deleted ones",
    ),
    QueryMetadata(
        query_class=ListEntities,
        handler_class=ListEntitiesHandler,
        category=CQRSCategory.ENTITY,
        rules=request_rules.list_entities_rules,
        result_kind=ResultKind.PAGED,
        is_paginated=True,
        description="List active entities of a family",
    ),
    QueryMetadata(
        query_class=ListEntitiesByField,
        handler_class=ListEntitiesByFieldHandler,
        category=CQRSCategory.ENTITY,
        rules=request_rules.list_entities_by_field_rules,
        result_kind=ResultKind.PAGED,
        is_paginated=True,
        description="List active entities matching a filterable field",
    ),
    QueryMetadata(
        query_class=ListEntitiesByDateRange,
        handler_class=ListEntitiesByDateRangeHandler,
        category=CQRSCategory.ENTITY,
        rules=request_rules.list_entities_by_date_range_rules,
        result_kind=ResultKind.PAGED,
        is_paginated=True,
        description="List active entities whose date field lies in a range",
    ),
    QueryMetadata(
        query_class=SearchEntities,
        handler_class=SearchEntitiesHandler,
        category=CQRSCategory.ENTITY,
        rules=request_rules.search_entities_rules,
        result_kind=ResultKind.PAGED,
        is_paginated=True,
        description="Substring search over a family's search fields",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Reference Queries (4 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetByOrdinalPosition,
        handler_class=GetByOrdinalPositionHandler,
        category=CQRSCategory.REFERENCE,
        rules=request_rules.get_by_ordinal_position_rules,
        result_kind=ResultKind.DTO_LIST,
        description="List a reference family in ordinal-position order",
    ),
    QueryMetadata(
        query_class=GetReferenceAtPosition,
        handler_class=GetReferenceAtPositionHandler,
        category=CQRSCategory.REFERENCE,
        rules=request_rules.get_reference_at_position_rules,
        description="Get the active reference at an ordinal position",
    ),
    QueryMetadata(
        query_class=GetDefaultReference,
        handler_class=GetDefaultReferenceHandler,
        category=CQRSCategory.REFERENCE,
        rules=request_rules.get_default_reference_rules,
        description="Get the default (lowest-position active) reference",
    ),
    QueryMetadata(
        query_class=FindReferencesByLabel,
        handler_class=FindReferencesByLabelHandler,
        category=CQRSCategory.REFERENCE,
        rules=request_rules.find_references_by_label_rules,
        result_kind=ResultKind.DTO_LIST,
        description="Find active references by label",
    ),
]
