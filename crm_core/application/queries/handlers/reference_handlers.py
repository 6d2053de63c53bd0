"""Reference family query handlers.

Ordinal ordering and default selection are applied here, on top of the
repository's plain listing, using crm_core.domain.ordering.
"""

from typing import Any

from crm_core.application.common.entity_handler import EntityHandler
from crm_core.application.queries.reference_queries import (
    FindReferencesByLabel,
    GetByOrdinalPosition,
    GetDefaultReference,
    GetReferenceAtPosition,
)
from crm_core.core.enums import ErrorCode
from crm_core.core.errors import DomainError, NotFoundError
from crm_core.core.result import Result, Success
from crm_core.domain.families import EntityFamily
from crm_core.domain.ordering import select_default, sort_by_position
from crm_core.domain.protocols.logger_protocol import LoggerProtocol


class GetByOrdinalPositionHandler(EntityHandler):
    """Handler for GetByOrdinalPosition query.

    Returns every member (active only by default) sorted by
    (ordinal_position, created_at, id).
    """

    async def _handle(
        self, query: GetByOrdinalPosition, family: EntityFamily, log: LoggerProtocol
    ) -> Result[list[Any], DomainError]:
        repository = self._repositories.reference(family.name)
        entities = sort_by_position(
            await repository.list_by_ordinal_position(active_only=query.active_only)
        )
        dtos = await self._project_many(family, entities, query.projection)
        log.info("References listed by position", count=len(dtos))
        return Success(value=dtos)


class GetReferenceAtPositionHandler(EntityHandler):
    """Handler for GetReferenceAtPosition query."""

    async def _handle(
        self,
        query: GetReferenceAtPosition,
        family: EntityFamily,
        log: LoggerProtocol,
    ) -> Result[Any, NotFoundError]:
        repository = self._repositories.reference(family.name)
        entities = sort_by_position(await repository.list_by_ordinal_position())
        found = next(
            (e for e in entities if e.ordinal_position == query.ordinal_position),
            None,
        )
        if found is None:
            log.warning(
                "No reference at position", ordinal_position=query.ordinal_position
            )
            return self._not_found(
                family,
                query.ordinal_position,
                code=ErrorCode.ORDINAL_POSITION_NOT_FOUND,
                message=f"No active {family.name} at position {query.ordinal_position}",
            )
        dto = await self._project(family, found, query.projection)
        log.info("Reference retrieved by position", entity_id=str(found.id))
        return Success(value=dto)


class GetDefaultReferenceHandler(EntityHandler):
    """Handler for GetDefaultReference query.

    The default is the active member with the lowest ordinal position;
    ties resolve by creation time, then id. An empty family (or one whose
    members are all soft-deleted) has no default.
    """

    async def _handle(
        self, query: GetDefaultReference, family: EntityFamily, log: LoggerProtocol
    ) -> Result[Any, NotFoundError]:
        repository = self._repositories.reference(family.name)
        default = select_default(await repository.list_by_ordinal_position())
        if default is None:
            log.warning("No default reference")
            return self._not_found(
                family,
                "default",
                code=ErrorCode.DEFAULT_NOT_FOUND,
                message=f"{family.name} has no active members",
            )
        dto = await self._project(family, default, query.projection)
        log.info(
            "Default reference retrieved",
            entity_id=str(default.id),
            ordinal_position=default.ordinal_position,
        )
        return Success(value=dto)


class FindReferencesByLabelHandler(EntityHandler):
    """Handler for FindReferencesByLabel query."""

    async def _handle(
        self, query: FindReferencesByLabel, family: EntityFamily, log: LoggerProtocol
    ) -> Result[list[Any], DomainError]:
        repository = self._repositories.reference(family.name)
        entities = sort_by_position(await repository.find_by_label(query.label))
        dtos = await self._project_many(family, entities, query.projection)
        log.info("References found by label", count=len(dtos))
        return Success(value=dtos)
