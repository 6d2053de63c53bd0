"""Projection kinds and the paged result envelope shared by every family."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from math import ceil
from uuid import UUID


class ProjectionKind(str, Enum):
    """Read projection tiers.

    SUMMARY is nested inside other DTOs, LIST feeds list screens and
    DETAILS carries every field plus resolved labels and aggregates.
    """

    SUMMARY = "summary"
    LIST = "list"
    DETAILS = "details"


@dataclass(frozen=True, kw_only=True)
class AuditedDetails:
    """Audit fields carried by every Details projection.

    Attributes:
        active: False once soft-deleted.
        created_by: User who created the entity.
        created_at: Creation timestamp.
        modified_by: User who last changed the entity.
        modified_at: Last change timestamp.
        version: Value to send back as expected_version on update.
    """

    active: bool
    created_by: UUID | None
    created_at: datetime
    modified_by: UUID | None
    modified_at: datetime
    version: int


@dataclass(frozen=True, kw_only=True)
class PagedResult[T]:
    """One page of a list query.

    Attributes:
        items: DTOs on this page.
        page_number: 1-based page index that was requested.
        page_size: Requested page size.
        total_count: Matching entities across all pages.
        total_pages: Number of pages (0 when nothing matched).
    """

    items: list[T]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int

    @classmethod
    def empty(cls, *, page_number: int, page_size: int) -> "PagedResult[T]":
        """Page with no items and no matches."""
        return cls(
            items=[],
            page_number=page_number,
            page_size=page_size,
            total_count=0,
            total_pages=0,
        )

    @staticmethod
    def count_pages(total_count: int, page_size: int) -> int:
        """Pages needed for ``total_count`` items."""
        return ceil(total_count / page_size) if total_count else 0

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1
