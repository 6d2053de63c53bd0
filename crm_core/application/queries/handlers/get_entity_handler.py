"""GetEntityById query handler.

Retrieves one entity of any family and returns its projection DTO.
Soft-deleted entities stay retrievable by id; the DTO reports active=False.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, NotFoundError]
- Side-effect free
"""

from typing import Any

from crm_core.application.common.entity_handler import EntityHandler
from crm_core.application.queries.entity_queries import GetEntityById
from crm_core.core.errors import NotFoundError
from crm_core.core.result import Result, Success
from crm_core.domain.families import EntityFamily
from crm_core.domain.protocols.logger_protocol import LoggerProtocol


class GetEntityByIdHandler(EntityHandler):
    """Handler for GetEntityById query."""

    async def _handle(
        self, query: GetEntityById, family: EntityFamily, log: LoggerProtocol
    ) -> Result[Any, NotFoundError]:
        entity = await self._repository(family).find_by_id(query.entity_id)
        if entity is None:
            log.warning("Entity not found", entity_id=str(query.entity_id))
            return self._not_found(family, query.entity_id)

        dto = await self._project(family, entity, query.projection)
        log.info(
            "Entity retrieved",
            entity_id=str(entity.id),
            active=entity.active,
        )
        return Success(value=dto)
