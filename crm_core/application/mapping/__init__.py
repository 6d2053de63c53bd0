"""Entity -> DTO mapping."""

from crm_core.application.mapping.entity_mapper import EntityMapper, MappingError
from crm_core.application.mapping.profiles import PROJECTION_PROFILES, get_projection

__all__ = [
    "PROJECTION_PROFILES",
    "EntityMapper",
    "MappingError",
    "get_projection",
]
