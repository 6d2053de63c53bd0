"""Checks shared by the create and update handlers.

Both must refuse references to missing or soft-deleted reference entities,
keep labels unique among the active members of a reference family, and turn
entity invariant failures into ValidationError results.
"""

from collections.abc import Iterable
from uuid import UUID

from crm_core.application.common.entity_handler import EntityHandler
from crm_core.core.enums import ErrorCode
from crm_core.core.errors import ConflictError, ValidationError
from crm_core.core.result import Failure
from crm_core.domain.entities import Entity, ReferenceEntity
from crm_core.domain.families import EntityFamily


class EntityWriteHandler(EntityHandler):
    """Base for handlers that persist entity state."""

    async def _check_references(
        self,
        family: EntityFamily,
        entity: Entity,
        attributes: Iterable[str] | None = None,
    ) -> Failure[ValidationError] | None:
        """Verify referenced reference entities exist and are active.

        Args:
            family: Family of ``entity``.
            entity: Entity about to be stored.
            attributes: Reference attributes to check (all when None).

        Returns:
            Failure for the first dangling reference, None when all resolve.
        """
        names = family.reference_fields.keys() if attributes is None else attributes
        for attribute in names:
            target = family.reference_fields.get(attribute)
            reference_id: UUID | None = getattr(entity, attribute)
            if target is None or reference_id is None:
                continue
            repository = self._repositories.get(target)
            if not await repository.exists(reference_id, active_only=True):
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.REFERENCE_NOT_FOUND,
                        message=f"{attribute} does not reference an active {target}",
                        field=attribute,
                        rule="reference_exists",
                        details={"reference_id": str(reference_id)},
                    )
                )
        return None

    async def _check_label(
        self, family: EntityFamily, entity: Entity
    ) -> Failure[ConflictError] | None:
        """Verify no other active member of the family has the same label.

        Returns:
            Failure when the label is taken, None otherwise (or for
            business families, which have no label).
        """
        if not isinstance(entity, ReferenceEntity):
            return None
        repository = self._repositories.reference(family.name)
        for other in await repository.find_by_label(entity.label):
            if other.id != entity.id:
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.LABEL_ALREADY_EXISTS,
                        message=f"{family.name} label already exists: {entity.label}",
                        resource_type=family.name,
                        conflicting_field="label",
                    )
                )
        return None

    @staticmethod
    def _invariant_failure(exc: Exception) -> Failure[ValidationError]:
        return Failure(
            error=ValidationError(
                code=ErrorCode.ENTITY_INVARIANT_VIOLATED,
                message=str(exc),
                rule="entity_invariant",
            )
        )

    @staticmethod
    def _version_conflict(
        family: EntityFamily, entity_id: UUID, expected: int, actual: int | None
    ) -> Failure[ConflictError]:
        return Failure(
            error=ConflictError(
                code=ErrorCode.ENTITY_VERSION_CONFLICT,
                message=f"{family.name} was modified by someone else",
                resource_type=family.name,
                conflicting_field="version",
                details={
                    "entity_id": str(entity_id),
                    "expected_version": str(expected),
                    "actual_version": str(actual),
                },
            )
        )
