"""Query handlers."""

from crm_core.application.queries.handlers.get_entity_handler import (
    GetEntityByIdHandler,
)
from crm_core.application.queries.handlers.list_entities_handlers import (
    ListEntitiesByDateRangeHandler,
    ListEntitiesByFieldHandler,
    ListEntitiesHandler,
    SearchEntitiesHandler,
)
from crm_core.application.queries.handlers.reference_handlers import (
    FindReferencesByLabelHandler,
    GetByOrdinalPositionHandler,
    GetDefaultReferenceHandler,
    GetReferenceAtPositionHandler,
)

__all__ = [
    "FindReferencesByLabelHandler",
    "GetByOrdinalPositionHandler",
    "GetDefaultReferenceHandler",
    "GetEntityByIdHandler",
    "GetReferenceAtPositionHandler",
    "ListEntitiesByDateRangeHandler",
    "ListEntitiesByFieldHandler",
    "ListEntitiesHandler",
    "SearchEntitiesHandler",
]
