"""UpdateEntity command handler.

Optimistic concurrency: the command carries the version the caller last
read. A mismatch (checked here, then again atomically by the repository's
compare-and-swap) is rejected with ConflictError and nothing is written.
"""

from typing import Any

from crm_core.application.commands.entity_commands import UpdateEntity
from crm_core.application.commands.handlers.write_handler import EntityWriteHandler
from crm_core.application.dtos.common import ProjectionKind
from crm_core.core.enums import ErrorCode
from crm_core.core.errors import ConflictError, DomainError
from crm_core.core.result import Failure, Result, Success
from crm_core.domain.families import EntityFamily
from crm_core.domain.protocols.logger_protocol import LoggerProtocol


class UpdateEntityHandler(EntityWriteHandler):
    """Handler for UpdateEntity command.

    Returns:
        Success(Details DTO) of the updated entity.
        Failure(NotFoundError) if the entity does not exist.
        Failure(ConflictError) if it is soft-deleted, the version is stale
            or the new label is taken.
        Failure(ValidationError) for invariant or reference failures.
    """

    async def _handle(
        self, cmd: UpdateEntity, family: EntityFamily, log: LoggerProtocol
    ) -> Result[Any, DomainError]:
        repository = self._repository(family)
        entity = await repository.find_by_id(cmd.entity_id)
        if entity is None:
            log.warning("Entity not found", entity_id=str(cmd.entity_id))
            return self._not_found(family, cmd.entity_id)

        if not entity.active:
            log.warning("Entity is deleted", entity_id=str(entity.id))
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ENTITY_INACTIVE,
                    message=f"{family.name} has been deleted",
                    resource_type=family.name,
                    conflicting_field="active",
                )
            )

        if entity.version != cmd.expected_version:
            log.warning(
                "Stale entity version",
                entity_id=str(entity.id),
                expected_version=cmd.expected_version,
                actual_version=entity.version,
            )
            return self._version_conflict(
                family, entity.id, cmd.expected_version, entity.version
            )

        try:
            entity.apply_changes(cmd.fields, cmd.modified_by)
        except (TypeError, ValueError) as exc:
            log.warning("Entity rejected", reason=str(exc))
            return self._invariant_failure(exc)

        failure = await self._check_references(family, entity, cmd.fields.keys())
        if failure is None and "label" in cmd.fields:
            failure = await self._check_label(family, entity)
        if failure is not None:
            log.warning("Entity rejected", reason=failure.error.message)
            return failure

        if not await repository.update(entity, expected_version=cmd.expected_version):
            log.warning("Concurrent update detected", entity_id=str(entity.id))
            return self._version_conflict(family, entity.id, cmd.expected_version, None)

        log.info("Entity updated", entity_id=str(entity.id), version=entity.version)
        return Success(value=await self._project(family, entity, ProjectionKind.DETAILS))
