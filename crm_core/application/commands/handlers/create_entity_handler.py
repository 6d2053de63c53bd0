"""CreateEntity command handler.

Builds the entity from the command fields (entity invariants apply), checks
its references and label, and stores it active at version 1.
"""

from typing import Any

from crm_core.application.commands.entity_commands import CreateEntity
from crm_core.application.commands.handlers.write_handler import EntityWriteHandler
from crm_core.application.dtos.common import ProjectionKind
from crm_core.core.errors import DomainError
from crm_core.core.result import Result, Success
from crm_core.domain.families import EntityFamily
from crm_core.domain.protocols.logger_protocol import LoggerProtocol


class CreateEntityHandler(EntityWriteHandler):
    """Handler for CreateEntity command.

    Returns:
        Success(Details DTO) of the stored entity.
        Failure(ValidationError) for invariant or reference failures.
        Failure(ConflictError) for a duplicate reference label.
    """

    async def _handle(
        self, cmd: CreateEntity, family: EntityFamily, log: LoggerProtocol
    ) -> Result[Any, DomainError]:
        try:
            entity = family.entity_class(created_by=cmd.created_by, **cmd.fields)
        except (TypeError, ValueError) as exc:
            log.warning("Entity rejected", reason=str(exc))
            return self._invariant_failure(exc)

        failure = await self._check_references(family, entity)
        if failure is None:
            failure = await self._check_label(family, entity)
        if failure is not None:
            log.warning("Entity rejected", reason=failure.error.message)
            return failure

        stored = await self._repository(family).add(entity)
        log.info("Entity created", entity_id=str(stored.id))
        return Success(value=await self._project(family, stored, ProjectionKind.DETAILS))
