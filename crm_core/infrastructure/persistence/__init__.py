"""Persistence adapters implementing the repository protocols."""

from crm_core.infrastructure.persistence.in_memory_repository import (
    InMemoryEntityRepository,
    InMemoryReferenceRepository,
    build_in_memory_repository,
)

__all__ = [
    "InMemoryEntityRepository",
    "InMemoryReferenceRepository",
    "build_in_memory_repository",
]
