"""Entity queries (CQRS read operations), valid for every family.

Queries are immutable dataclasses with question-like names. They carry no
logic and never change state; issuing the same query twice against
unchanged data returns equal results.

Pattern:
- ``family`` names the entity family (see crm_core.domain.families)
- Handlers fetch, apply policy and return DTOs
- Validation happens in the dispatcher, before any handler runs
"""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from datetime import date, datetime
from typing import Any
from uuid import UUID

from crm_core.application.dtos.common import ProjectionKind
from crm_core.core.config import get_settings


def _default_page_size() -> int:
    return get_settings().default_page_size


@dataclass(frozen=True, kw_only=True)
class GetEntityById:
    """Get a single entity by ID.

    Soft-deleted entities are still returned (``active=False`` in the DTO).

    Attributes:
        family: Entity family (e.g. "account_type", "company").
        entity_id: Entity to retrieve.
        projection: Projection tier of the result.

    Example:
        >>> query = GetEntityById(family="call_type", entity_id=call_type_id)
        >>> result = await dispatcher.dispatch(query)
    """

    family: str
    entity_id: UUID
    projection: ProjectionKind = ProjectionKind.DETAILS


@dataclass(frozen=True, kw_only=True)
class ListEntities:
    """List active entities of a family, one page at a time.

    Reference families are listed in ordinal-position order, business
    families in creation order.

    Attributes:
        family: Entity family.
        page_number: 1-based page index.
        page_size: Items per page (1 to the configured maximum).
        projection: Projection tier of the items.
    """

    family: str
    page_number: int = 1
    page_size: int = dataclass_field(default_factory=_default_page_size)
    projection: ProjectionKind = ProjectionKind.LIST


@dataclass(frozen=True, kw_only=True)
class ListEntitiesByField:
    """List active entities whose ``field`` equals ``value``.

    Covers lookups such as "invoices of a company", "people with a status"
    or "order by number". ``field`` must be filterable for the family.

    Attributes:
        family: Entity family.
        field: Filterable attribute (e.g. "company_id").
        value: Value to match exactly.
        page_number: 1-based page index.
        page_size: Items per page.
        projection: Projection tier of the items.

    Example:
        >>> query = ListEntitiesByField(
        ...     family="invoice",
        ...     field="company_id",
        ...     value=company_id,
        ... )
    """

    family: str
    field: str
    value: Any
    page_number: int = 1
    page_size: int = dataclass_field(default_factory=_default_page_size)
    projection: ProjectionKind = ProjectionKind.LIST


@dataclass(frozen=True, kw_only=True)
class ListEntitiesByDateRange:
    """List active entities whose date ``field`` lies in [start, end].

    Attributes:
        family: Entity family.
        field: Date attribute declared for the family (e.g. "order_date").
        start: Inclusive lower bound.
        end: Inclusive upper bound (must not precede ``start``).
        page_number: 1-based page index.
        page_size: Items per page.
        projection: Projection tier of the items.
    """

    family: str
    field: str
    start: date | datetime
    end: date | datetime
    page_number: int = 1
    page_size: int = dataclass_field(default_factory=_default_page_size)
    projection: ProjectionKind = ProjectionKind.LIST


@dataclass(frozen=True, kw_only=True)
class SearchEntities:
    """Case-insensitive substring search over a family's search fields.

    Attributes:
        family: Entity family.
        text: Text to look for (non-blank, bounded length).
        page_number: 1-based page index.
        page_size: Items per page.
        projection: Projection tier of the items.
    """

    family: str
    text: str
    page_number: int = 1
    page_size: int = dataclass_field(default_factory=_default_page_size)
    projection: ProjectionKind = ProjectionKind.LIST
