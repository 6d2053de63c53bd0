"""Convention-based entity -> DTO mapper.

Each DTO field is filled, in order of precedence, from:
    1. ``extras`` passed by the handler (derived aggregates such as
       usage_count or line_item_count)
    2. the entity attribute (or property) of the same name; lists of
       owned entities are mapped to their summary projection
    3. ``<reference>_name``: the label of the reference entity whose id is
       in ``<reference>_id``, looked up through the reference repository

A DTO field none of these can fill is a configuration error and raises
MappingError; it never silently defaults.
"""

from collections.abc import Iterable, Mapping
from dataclasses import fields
from typing import Any
from uuid import UUID

from crm_core.application.common.repository_registry import RepositoryRegistry
from crm_core.application.dtos.common import ProjectionKind
from crm_core.application.mapping.profiles import get_projection
from crm_core.domain.entities.base import Entity
from crm_core.domain.families import get_family_for_class

_MISSING = object()


class MappingError(Exception):
    """An entity cannot be mapped to the requested projection."""


class EntityMapper:
    """Maps domain entities to their projection DTOs.

    Args:
        repositories: Used to resolve reference labels.
    """

    def __init__(self, repositories: RepositoryRegistry) -> None:
        self._repositories = repositories

    async def map(
        self,
        entity: Entity,
        projection: ProjectionKind,
        *,
        extras: Mapping[str, Any] | None = None,
    ) -> Any:
        """Map one entity.

        Args:
            entity: Entity to project.
            projection: Projection tier.
            extras: Values for DTO fields the entity does not carry.

        Returns:
            DTO instance.

        Raises:
            MappingError: No profile for the entity, or a field cannot be filled.
        """
        return await self._map(entity, projection, extras or {}, {})

    async def map_many(
        self, entities: Iterable[Entity], projection: ProjectionKind
    ) -> list[Any]:
        """Map several entities, sharing reference label lookups between them.

        Args:
            entities: Entities to project.
            projection: Projection tier.

        Returns:
            DTOs, in input order.

        Raises:
            MappingError: No profile for an entity, or a field cannot be filled.
        """
        labels: dict[tuple[str, UUID], str | None] = {}
        return [await self._map(entity, projection, {}, labels) for entity in entities]

    async def _map(
        self,
        entity: Entity,
        projection: ProjectionKind,
        extras: Mapping[str, Any],
        labels: dict[tuple[str, UUID], str | None],
    ) -> Any:
        dto_class = get_projection(type(entity), projection)
        if dto_class is None:
            raise MappingError(
                f"No {projection.value} projection for {type(entity).__name__}"
            )

        family = get_family_for_class(type(entity))
        reference_fields = family.reference_fields if family else {}

        values: dict[str, Any] = {}
        for dto_field in fields(dto_class):
            name = dto_field.name
            if name in extras:
                values[name] = extras[name]
                continue

            value = getattr(entity, name, _MISSING)
            if value is not _MISSING:
                values[name] = await self._convert(value, labels)
                continue

            id_field = name.removesuffix("_name") + "_id"
            if name.endswith("_name") and id_field in reference_fields:
                values[name] = await self._label(
                    reference_fields[id_field], getattr(entity, id_field), labels
                )
                continue

            raise MappingError(
                f"{dto_class.__name__}.{name} cannot be filled from "
                f"{type(entity).__name__}"
            )
        return dto_class(**values)

    async def _convert(
        self, value: Any, labels: dict[tuple[str, UUID], str | None]
    ) -> Any:
        if isinstance(value, list) and all(isinstance(v, Entity) for v in value):
            return tuple(
                [await self._map(v, ProjectionKind.SUMMARY, {}, labels) for v in value]
            )
        return value

    async def _label(
        self,
        family: str,
        reference_id: UUID | None,
        labels: dict[tuple[str, UUID], str | None],
    ) -> str | None:
        if reference_id is None:
            return None
        key = (family, reference_id)
        if key not in labels:
            reference = await self._repositories.get(family).find_by_id(reference_id)
            labels[key] = getattr(reference, "label", None)
        return labels[key]
