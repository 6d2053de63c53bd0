"""Entity family registry exports."""

from crm_core.domain.families.metadata import EntityFamily, EntityKind, UsageSource
from crm_core.domain.families.registry import (
    FAMILY_REGISTRY,
    get_family,
    get_family_for_class,
    get_family_names,
    get_statistics,
    get_usage_sources,
    require_family,
)

__all__ = [
    "EntityFamily",
    "EntityKind",
    "UsageSource",
    "FAMILY_REGISTRY",
    "get_family",
    "get_family_for_class",
    "get_family_names",
    "get_statistics",
    "get_usage_sources",
    "require_family",
]
