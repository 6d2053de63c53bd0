"""In-memory repository implementations.

Adapter for the EntityRepository / ReferenceRepository protocols backed by a
dict keyed by entity id. Used by the container when no database adapter is
configured, and by the behavioural tests.

Entities go in and come out as deep copies: callers never share state with
the store, so a command that fails half-way leaves storage untouched.
"""

from collections.abc import Iterable, Sequence
from copy import deepcopy
from datetime import UTC, date, datetime
from typing import Any
from uuid import UUID

from crm_core.domain.entities.base import Entity
from crm_core.domain.entities.reference import ReferenceEntity
from crm_core.domain.families import EntityFamily
from crm_core.domain.ordering import sort_by_position


def _creation_key(entity: Entity) -> tuple[datetime, UUID]:
    return (entity.created_at, entity.id)


def _as_utc(value: date) -> date:
    """Read a naive datetime as UTC. Dates and aware datetimes pass through."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _as_comparable(value: date, bound: date) -> date:
    """Align date/datetime so a stored value can be compared to a bound.

    ``bound`` is expected to have been passed through ``_as_utc`` already.
    """
    if isinstance(value, datetime) and not isinstance(bound, datetime):
        return value.date()
    if not isinstance(value, datetime) and isinstance(bound, datetime):
        return datetime.combine(value, datetime.min.time(), tzinfo=bound.tzinfo)
    return _as_utc(value)


class InMemoryEntityRepository:
    """Dict-backed repository for one business family.

    Implements EntityRepository protocol without inheritance.

    Attributes:
        family: Family key this repository serves.
        entity_class: Entity class stored here (checked on add/update).
    """

    def __init__(self, family: EntityFamily) -> None:
        self.family = family.name
        self.entity_class = family.entity_class
        self._entities: dict[UUID, Entity] = {}

    def _select(self, *, active_only: bool) -> Iterable[Entity]:
        return (e for e in self._entities.values() if e.active or not active_only)

    @staticmethod
    def _copies[E: Entity](entities: Iterable[E]) -> list[E]:
        return [deepcopy(entity) for entity in entities]

    def _check_type(self, entity: Entity) -> None:
        if not isinstance(entity, self.entity_class):
            raise TypeError(
                f"{self.family} repository cannot store {type(entity).__name__}"
            )

    async def find_by_id(self, entity_id: UUID) -> Entity | None:
        entity = self._entities.get(entity_id)
        return deepcopy(entity) if entity is not None else None

    async def exists(self, entity_id: UUID, *, active_only: bool = False) -> bool:
        entity = self._entities.get(entity_id)
        if entity is None:
            return False
        return entity.active or not active_only

    async def list_all(self, *, active_only: bool = True) -> list[Entity]:
        entities = self._select(active_only=active_only)
        return self._copies(sorted(entities, key=_creation_key))

    async def find_by_field(
        self, field: str, value: Any, *, active_only: bool = True
    ) -> list[Entity]:
        matches = (
            e for e in self._select(active_only=active_only)
            if getattr(e, field) == value
        )
        return self._copies(sorted(matches, key=_creation_key))

    async def find_in_range(
        self,
        field: str,
        start: date,
        end: date,
        *,
        active_only: bool = True,
    ) -> list[Entity]:
        start, end = _as_utc(start), _as_utc(end)
        matches = []
        for entity in self._select(active_only=active_only):
            value = getattr(entity, field)
            if value is None:
                continue
            if _as_comparable(value, start) < start:
                continue
            if _as_comparable(value, end) > end:
                continue
            matches.append(entity)
        matches.sort(
            key=lambda e: (_as_comparable(getattr(e, field), start), *_creation_key(e))
        )
        return self._copies(matches)

    async def search(
        self, text: str, fields: Sequence[str], *, active_only: bool = True
    ) -> list[Entity]:
        needle = text.casefold()
        matches = []
        for entity in self._select(active_only=active_only):
            for field in fields:
                value = getattr(entity, field)
                if isinstance(value, str) and needle in value.casefold():
                    matches.append(entity)
                    break
        return self._copies(sorted(matches, key=_creation_key))

    async def count_usages_of(self, field: str, reference_id: UUID) -> int:
        return sum(
            1 for e in self._select(active_only=True)
            if getattr(e, field) == reference_id
        )

    async def add(self, entity: Entity) -> Entity:
        self._check_type(entity)
        if entity.id in self._entities:
            raise ValueError(f"{self.family} {entity.id} already exists")
        self._entities[entity.id] = deepcopy(entity)
        return deepcopy(entity)

    async def update(self, entity: Entity, *, expected_version: int) -> bool:
        self._check_type(entity)
        stored = self._entities.get(entity.id)
        if stored is None or stored.version != expected_version:
            return False
        self._entities[entity.id] = deepcopy(entity)
        return True

    async def delete(
        self,
        entity_id: UUID,
        *,
        modified_by: UUID | None,
        expected_version: int | None = None,
    ) -> bool:
        stored = self._entities.get(entity_id)
        if stored is None:
            return False
        if expected_version is not None and stored.version != expected_version:
            return False
        candidate = deepcopy(stored)
        if not candidate.soft_delete(modified_by):
            return False
        self._entities[entity_id] = candidate
        return True

    async def seed(self, entities: Iterable[Entity]) -> None:
        """Bulk-load entities (fixtures, demo data). Existing ids are replaced."""
        for entity in entities:
            self._check_type(entity)
            self._entities[entity.id] = deepcopy(entity)


class InMemoryReferenceRepository(InMemoryEntityRepository):
    """Dict-backed repository for one reference family.

    Adds the ordinal-position and label lookups of ReferenceRepository.
    """

    async def list_by_ordinal_position(
        self, *, active_only: bool = True
    ) -> list[ReferenceEntity]:
        return self._copies(sort_by_position(self._select(active_only=active_only)))

    async def find_by_label(
        self, label: str, *, active_only: bool = True
    ) -> list[ReferenceEntity]:
        needle = label.strip().casefold()
        matches = (
            e for e in self._select(active_only=active_only)
            if e.label.strip().casefold() == needle
        )
        return self._copies(sort_by_position(matches))


def build_in_memory_repository(
    family: EntityFamily,
) -> InMemoryEntityRepository:
    """Create the in-memory repository matching a family's kind.

    Args:
        family: Registered family metadata.

    Returns:
        InMemoryReferenceRepository for reference families,
        InMemoryEntityRepository otherwise.
    """
    if family.is_reference:
        return InMemoryReferenceRepository(family)
    return InMemoryEntityRepository(family)
