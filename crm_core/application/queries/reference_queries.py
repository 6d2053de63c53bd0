"""Reference family queries.

Only valid for reference families (types, statuses, directions, methods).
"""

from dataclasses import dataclass

from crm_core.application.dtos.common import ProjectionKind


@dataclass(frozen=True, kw_only=True)
class GetByOrdinalPosition:
    """List a reference family sorted by ordinal position.

    Ties are broken by creation time, then id, so the order is stable.

    Attributes:
        family: Reference family.
        active_only: Exclude soft-deleted members (default).
        projection: Projection tier of the items.
    """

    family: str
    active_only: bool = True
    projection: ProjectionKind = ProjectionKind.LIST


@dataclass(frozen=True, kw_only=True)
class GetReferenceAtPosition:
    """Get the active member sitting at ``ordinal_position``.

    When several members share the position, the first in stable order wins.

    Attributes:
        family: Reference family.
        ordinal_position: Position to look up (>= 0).
        projection: Projection tier of the result.
    """

    family: str
    ordinal_position: int
    projection: ProjectionKind = ProjectionKind.DETAILS


@dataclass(frozen=True, kw_only=True)
class GetDefaultReference:
    """Get the default member of a reference family.

    The default is the active member with the lowest ordinal position.

    Attributes:
        family: Reference family.
        projection: Projection tier of the result.

    Example:
        >>> result = await dispatcher.dispatch(
        ...     GetDefaultReference(family="account_status")
        ... )
    """

    family: str
    projection: ProjectionKind = ProjectionKind.DETAILS


@dataclass(frozen=True, kw_only=True)
class FindReferencesByLabel:
    """Find active members by label (case-insensitive exact match).

    Attributes:
        family: Reference family.
        label: Type/status/direction/method name.
        projection: Projection tier of the items.
    """

    family: str
    label: str
    projection: ProjectionKind = ProjectionKind.LIST
