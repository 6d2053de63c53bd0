"""Reference family projections.

Shared by every reference family: a type, a status, a direction and a
method all project to the same three shapes.
"""

from dataclasses import dataclass
from uuid import UUID

from crm_core.application.dtos.common import AuditedDetails


@dataclass(frozen=True, kw_only=True)
class ReferenceSummary:
    """Minimal reference projection, nested inside other DTOs."""

    id: UUID
    label: str
    ordinal_position: int


@dataclass(frozen=True, kw_only=True)
class ReferenceListItem:
    """Reference projection for ordered lists and pickers."""

    id: UUID
    label: str
    description: str | None
    ordinal_position: int
    active: bool


@dataclass(frozen=True, kw_only=True)
class ReferenceDetails(AuditedDetails):
    """Full reference projection.

    Attributes:
        usage_count: Active business entities pointing at this value.
            None when no business family references the family.
    """

    id: UUID
    label: str
    description: str | None
    ordinal_position: int
    usage_count: int | None
