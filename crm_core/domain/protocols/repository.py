"""Repository protocols.

Defines the persistence contract consumed by the handlers. Repositories are
dumb storage: they never pick defaults, enforce usage rules or validate
requests. Handlers apply those policies on top of these primitives.

**Design Principles**:
- Methods return domain entities, never storage rows
- Returned entities are copies: mutating one does not touch storage until
  ``update``/``delete`` is awaited
- ``update`` and ``delete`` are compare-and-swap on ``version``
- ``list_*``/``find_*`` return active entities unless ``active_only=False``
- ``find_by_id`` returns the entity whatever its active flag
"""

from collections.abc import Sequence
from datetime import date, datetime
from typing import Any, Protocol
from uuid import UUID

from crm_core.domain.entities.base import Entity
from crm_core.domain.entities.reference import ReferenceEntity


class EntityRepository(Protocol):
    """Protocol for persistence of one entity family.

    Infrastructure provides concrete implementations (in-memory, SQL, ...).
    """

    family: str

    async def find_by_id(self, entity_id: UUID) -> Entity | None:
        """Find an entity by id, including soft-deleted ones.

        Args:
            entity_id: Entity identifier.

        Returns:
            Entity if found, None otherwise.
        """
        ...

    async def exists(self, entity_id: UUID, *, active_only: bool = False) -> bool:
        """Check whether an entity exists.

        Args:
            entity_id: Entity identifier.
            active_only: Only count active entities.

        Returns:
            True if a matching entity exists.
        """
        ...

    async def list_all(self, *, active_only: bool = True) -> list[Entity]:
        """List entities ordered by creation time, then id.

        Args:
            active_only: Exclude soft-deleted entities (default).

        Returns:
            List of entities.
        """
        ...

    async def find_by_field(
        self, field: str, value: Any, *, active_only: bool = True
    ) -> list[Entity]:
        """List entities whose ``field`` equals ``value``.

        Args:
            field: Entity attribute name.
            value: Value to match.
            active_only: Exclude soft-deleted entities (default).

        Returns:
            Matching entities ordered by creation time, then id.
        """
        ...

    async def find_in_range(
        self,
        field: str,
        start: date | datetime,
        end: date | datetime,
        *,
        active_only: bool = True,
    ) -> list[Entity]:
        """List entities whose ``field`` lies in [start, end].

        Entities with the field unset are excluded.

        Args:
            field: Date or datetime attribute name.
            start: Inclusive lower bound.
            end: Inclusive upper bound.
            active_only: Exclude soft-deleted entities (default).

        Returns:
            Matching entities ordered by ``field``, then creation time.
        """
        ...

    async def search(
        self, text: str, fields: Sequence[str], *, active_only: bool = True
    ) -> list[Entity]:
        """Case-insensitive substring search over string fields.

        Args:
            text: Text to look for.
            fields: Attributes to search.
            active_only: Exclude soft-deleted entities (default).

        Returns:
            Matching entities ordered by creation time, then id.
        """
        ...

    async def count_usages_of(self, field: str, reference_id: UUID) -> int:
        """Count active entities whose ``field`` references ``reference_id``.

        Args:
            field: Reference attribute (e.g. "account_type_id").
            reference_id: Referenced reference-entity id.

        Returns:
            Number of active entities using the reference.
        """
        ...

    async def add(self, entity: Entity) -> Entity:
        """Persist a new entity.

        Args:
            entity: Entity to store.

        Returns:
            The stored entity (copy).

        Raises:
            ValueError: If an entity with the same id already exists.
        """
        ...

    async def update(self, entity: Entity, *, expected_version: int) -> bool:
        """Replace a stored entity if its stored version still matches.

        Args:
            entity: Mutated entity (version already bumped by the entity).
            expected_version: Version the caller read before mutating.

        Returns:
            True if stored, False if missing or the stored version differs.
        """
        ...

    async def delete(
        self,
        entity_id: UUID,
        *,
        modified_by: UUID | None,
        expected_version: int | None = None,
    ) -> bool:
        """Soft-delete an entity (active=False, audit refreshed).

        Args:
            entity_id: Entity identifier.
            modified_by: User performing the deletion.
            expected_version: When set, only delete if the stored version matches.

        Returns:
            True if the entity was active and is now deleted; False if it is
            missing, already inactive or the version differs.
        """
        ...


class ReferenceRepository(EntityRepository, Protocol):
    """Protocol for reference (lookup) family persistence."""

    async def list_by_ordinal_position(
        self, *, active_only: bool = True
    ) -> list[ReferenceEntity]:
        """List entities sorted by (ordinal_position, created_at, id).

        Args:
            active_only: Exclude soft-deleted entities (default).

        Returns:
            Entities in ascending position order.
        """
        ...

    async def find_by_label(
        self, label: str, *, active_only: bool = True
    ) -> list[ReferenceEntity]:
        """Find entities whose label matches (case-insensitive).

        Args:
            label: Type/status/direction/method name.
            active_only: Exclude soft-deleted entities (default).

        Returns:
            Matching entities in ascending position order.
        """
        ...
