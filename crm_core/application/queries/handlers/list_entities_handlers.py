"""List and search query handlers.

Each handler fetches the matching active entities, then pages and projects
them. Paging happens here rather than in the repository so every adapter
reports identical ``total_count``/``total_pages``.
"""

from typing import Any

from crm_core.application.common.entity_handler import EntityHandler
from crm_core.application.dtos.common import PagedResult
from crm_core.application.queries.entity_queries import (
    ListEntities,
    ListEntitiesByDateRange,
    ListEntitiesByField,
    SearchEntities,
)
from crm_core.core.errors import DomainError
from crm_core.core.result import Result, Success
from crm_core.domain.families import EntityFamily
from crm_core.domain.ordering import sort_by_position
from crm_core.domain.protocols.logger_protocol import LoggerProtocol


class ListEntitiesHandler(EntityHandler):
    """Handler for ListEntities query.

    Reference families come back in ordinal-position order, business
    families in creation order.
    """

    async def _handle(
        self, query: ListEntities, family: EntityFamily, log: LoggerProtocol
    ) -> Result[PagedResult[Any], DomainError]:
        if family.is_reference:
            repository = self._repositories.reference(family.name)
            entities = sort_by_position(await repository.list_by_ordinal_position())
        else:
            entities = await self._repository(family).list_all()

        page = await self._page(family, entities, query)
        log.info(
            "Entities listed",
            total_count=page.total_count,
            page_number=page.page_number,
        )
        return Success(value=page)


class ListEntitiesByFieldHandler(EntityHandler):
    """Handler for ListEntitiesByField query."""

    async def _handle(
        self, query: ListEntitiesByField, family: EntityFamily, log: LoggerProtocol
    ) -> Result[PagedResult[Any], DomainError]:
        entities = await self._repository(family).find_by_field(
            query.field, query.value
        )
        page = await self._page(family, entities, query)
        log.info(
            "Entities listed by field",
            field=query.field,
            total_count=page.total_count,
        )
        return Success(value=page)


class ListEntitiesByDateRangeHandler(EntityHandler):
    """Handler for ListEntitiesByDateRange query."""

    async def _handle(
        self,
        query: ListEntitiesByDateRange,
        family: EntityFamily,
        log: LoggerProtocol,
    ) -> Result[PagedResult[Any], DomainError]:
        entities = await self._repository(family).find_in_range(
            query.field, query.start, query.end
        )
        page = await self._page(family, entities, query)
        log.info(
            "Entities listed by date range",
            field=query.field,
            start=query.start.isoformat(),
            end=query.end.isoformat(),
            total_count=page.total_count,
        )
        return Success(value=page)


class SearchEntitiesHandler(EntityHandler):
    """Handler for SearchEntities query.

    Matches the text against the family's declared search fields.
    """

    async def _handle(
        self, query: SearchEntities, family: EntityFamily, log: LoggerProtocol
    ) -> Result[PagedResult[Any], DomainError]:
        entities = await self._repository(family).search(
            query.text.strip(), family.search_fields
        )
        page = await self._page(family, entities, query)
        log.info("Entities searched", total_count=page.total_count)
        return Success(value=page)
