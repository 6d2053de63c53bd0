"""Base class shared by every entity handler.

Owns the steps each handler repeats: resolving the family and its
repository, binding a scoped logger, projecting entities to DTOs (with the
derived aggregates Details carry), paging, and logging unexpected exceptions
with family context before re-raising them.

Subclasses implement ``_handle`` and only contain their own policy.
"""

from collections.abc import Sequence
from typing import Any, Protocol
from uuid import UUID

from crm_core.application.common.repository_registry import RepositoryRegistry
from crm_core.application.dtos.common import PagedResult, ProjectionKind
from crm_core.application.mapping.entity_mapper import EntityMapper
from crm_core.core.enums import ErrorCode
from crm_core.core.errors import NotFoundError
from crm_core.core.result import Failure, Result
from crm_core.domain.entities import Entity, SalesOrder
from crm_core.domain.families import EntityFamily, get_usage_sources, require_family
from crm_core.domain.protocols.logger_protocol import LoggerProtocol
from crm_core.domain.protocols.repository import EntityRepository


class FamilyRequest(Protocol):
    """Any request addressed to one entity family."""

    family: str


class PagedRequest(FamilyRequest, Protocol):
    page_number: int
    page_size: int
    projection: ProjectionKind


def paginate[T](items: Sequence[T], page_number: int, page_size: int) -> list[T]:
    """Slice one 1-based page out of ``items``."""
    start = (page_number - 1) * page_size
    return list(items[start : start + page_size])


class EntityHandler:
    """Base handler for family-addressed requests.

    Dependencies (injected via constructor):
        - RepositoryRegistry: Family repositories
        - EntityMapper: Entity -> DTO projection
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        repositories: RepositoryRegistry,
        mapper: EntityMapper,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            repositories: Family name -> repository lookup.
            mapper: Projection mapper.
            logger: Structured logger.
        """
        self._repositories = repositories
        self._mapper = mapper
        self._logger = logger

    async def handle(self, request: Any) -> Result[Any, Any]:
        """Handle a request for one entity family.

        Args:
            request: Query or command carrying a ``family`` name.

        Returns:
            The subclass outcome (Success or Failure).

        Raises:
            Exception: Unexpected repository or mapper failures, re-raised
                unchanged after logging, with a note naming the family.
        """
        family = require_family(request.family)
        log = self._logger.bind(handler=type(self).__name__, family=family.name)
        log.debug("Handling request", request_type=type(request).__name__)
        try:
            return await self._handle(request, family, log)
        except Exception as exc:
            log.error(
                "Request failed unexpectedly",
                error=exc,
                request_type=type(request).__name__,
            )
            exc.add_note(
                f"while handling {type(request).__name__} for family {family.name!r}"
            )
            raise

    async def _handle(
        self, request: Any, family: EntityFamily, log: LoggerProtocol
    ) -> Result[Any, Any]:
        raise NotImplementedError

    def _repository(self, family: EntityFamily) -> EntityRepository:
        return self._repositories.get(family.name)

    async def _usage_count(self, family: EntityFamily, reference_id: UUID) -> int | None:
        """Active business entities referencing ``reference_id``.

        Returns:
            The count, or None when no business family references the family.
        """
        sources = get_usage_sources(family.name)
        if not sources:
            return None
        total = 0
        for source in sources:
            repository = self._repositories.get(source.family)
            total += await repository.count_usages_of(source.field, reference_id)
        return total

    async def _details_extras(
        self, family: EntityFamily, entity: Entity
    ) -> dict[str, Any]:
        extras: dict[str, Any] = {}
        if family.is_reference:
            extras["usage_count"] = await self._usage_count(family, entity.id)
        if isinstance(entity, SalesOrder):
            extras["line_item_count"] = len(entity.active_line_items)
        return extras

    async def _project(
        self, family: EntityFamily, entity: Entity, projection: ProjectionKind
    ) -> Any:
        extras = None
        if projection == ProjectionKind.DETAILS:
            extras = await self._details_extras(family, entity)
        return await self._mapper.map(entity, projection, extras=extras)

    async def _project_many(
        self,
        family: EntityFamily,
        entities: Sequence[Entity],
        projection: ProjectionKind,
    ) -> list[Any]:
        if projection != ProjectionKind.DETAILS:
            return await self._mapper.map_many(entities, projection)
        return [await self._project(family, entity, projection) for entity in entities]

    async def _page(
        self,
        family: EntityFamily,
        entities: Sequence[Entity],
        request: PagedRequest,
    ) -> PagedResult[Any]:
        window = paginate(entities, request.page_number, request.page_size)
        return PagedResult(
            items=await self._project_many(family, window, request.projection),
            page_number=request.page_number,
            page_size=request.page_size,
            total_count=len(entities),
            total_pages=PagedResult.count_pages(len(entities), request.page_size),
        )

    @staticmethod
    def _not_found(
        family: EntityFamily,
        resource_id: object,
        *,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        message: str | None = None,
    ) -> Failure[NotFoundError]:
        return Failure(
            error=NotFoundError(
                code=code,
                message=message or f"{family.name} not found",
                resource_type=family.name,
                resource_id=str(resource_id),
            )
        )
