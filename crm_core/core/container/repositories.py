"""Repository singletons."""

from functools import lru_cache

from crm_core.application.common.repository_registry import RepositoryRegistry
from crm_core.domain.families import FAMILY_REGISTRY
from crm_core.infrastructure.persistence.in_memory_repository import (
    build_in_memory_repository,
)


@lru_cache
def get_repository_registry() -> RepositoryRegistry:
    """Return the app-scoped repository registry.

    One in-memory repository per registered family. A database-backed
    deployment swaps the adapter here; handlers only see the protocols.

    Returns:
        RepositoryRegistry: Family name -> repository.
    """
    return RepositoryRegistry(
        {family.name: build_in_memory_repository(family) for family in FAMILY_REGISTRY}
    )
