"""Ordinal-position ordering and default selection for reference families.

Order is ascending ``ordinal_position``; ties resolve by creation time, then
by identifier, so repeated calls over the same data always agree.
The default of a family is the first active member in that order.
"""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from crm_core.domain.entities.reference import ReferenceEntity


def position_key(entity: ReferenceEntity) -> tuple[int, datetime, UUID]:
    """Sort key: (ordinal_position, created_at, id)."""
    return (entity.ordinal_position, entity.created_at, entity.id)


def sort_by_position[R: ReferenceEntity](entities: Iterable[R]) -> list[R]:
    """Return entities sorted by ordinal position with a stable tie-break.

    Args:
        entities: Reference entities of one family.

    Returns:
        New list in ascending position order.
    """
    return sorted(entities, key=position_key)


def select_default[R: ReferenceEntity](entities: Iterable[R]) -> R | None:
    """Pick the default member of a family.

    Args:
        entities: Reference entities of one family (active or not).

    Returns:
        The active entity with the lowest position, or None when the
        family has no active member.
    """
    active = [entity for entity in entities if entity.active]
    if not active:
        return None
    return min(active, key=position_key)
