"""DeleteEntity command handler.

Soft delete only: the entity is marked inactive, its audit fields are
refreshed and it stays retrievable by id. Deleting a sales order also
deactivates its line items.

Outcomes:
    missing                 -> Failure(NotFoundError)
    already inactive        -> Success(False), nothing written
    stale expected_version  -> Failure(ConflictError)
    otherwise               -> Success(True)
"""

from crm_core.application.commands.entity_commands import DeleteEntity
from crm_core.application.commands.handlers.write_handler import EntityWriteHandler
from crm_core.core.errors import DomainError
from crm_core.core.result import Result, Success
from crm_core.domain.families import EntityFamily
from crm_core.domain.protocols.logger_protocol import LoggerProtocol


class DeleteEntityHandler(EntityWriteHandler):
    """Handler for DeleteEntity command."""

    async def _handle(
        self, cmd: DeleteEntity, family: EntityFamily, log: LoggerProtocol
    ) -> Result[bool, DomainError]:
        repository = self._repository(family)
        entity = await repository.find_by_id(cmd.entity_id)
        if entity is None:
            log.warning("Entity not found", entity_id=str(cmd.entity_id))
            return self._not_found(family, cmd.entity_id)

        if not entity.active:
            log.info("Entity already deleted", entity_id=str(entity.id))
            return Success(value=False)

        expected = cmd.expected_version
        if expected is not None and entity.version != expected:
            log.warning(
                "Stale entity version",
                entity_id=str(entity.id),
                expected_version=expected,
                actual_version=entity.version,
            )
            return self._version_conflict(family, entity.id, expected, entity.version)

        deleted = await repository.delete(
            entity.id,
            modified_by=cmd.modified_by,
            expected_version=entity.version,
        )
        if not deleted:
            log.warning("Concurrent update detected", entity_id=str(entity.id))
            return self._version_conflict(
                family, entity.id, expected or entity.version, None
            )

        log.info("Entity deleted", entity_id=str(entity.id))
        return Success(value=True)
