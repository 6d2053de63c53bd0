"""Entity commands (CQRS write operations), valid for every family.

Commands represent user intent to change one entity (a sales order counts
as one entity together with its line items). They are immutable dataclasses
with imperative names and carry no logic.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateEntity:
    """Create a new entity.

    Attributes:
        family: Entity family (e.g. "call_type", "sales_order").
        fields: Writable field values. For a sales order, ``line_items`` is a
            list of line item field mappings.
        created_by: User creating the entity.

    Example:
        >>> command = CreateEntity(
        ...     family="call_type",
        ...     fields={"label": "Inbound", "ordinal_position": 0},
        ...     created_by=user_id,
        ... )
    """

    family: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    created_by: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateEntity:
    """Change writable fields of an existing, active entity.

    Attributes:
        family: Entity family.
        entity_id: Entity to change.
        fields: Field name -> new value (at least one).
        expected_version: Version the caller last read; a stale version is
            rejected with a conflict.
        modified_by: User making the change.
    """

    family: str
    entity_id: UUID
    fields: Mapping[str, Any]
    expected_version: int
    modified_by: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteEntity:
    """Soft-delete an entity (active=False). Entities are never removed.

    Attributes:
        family: Entity family.
        entity_id: Entity to delete.
        modified_by: User performing the deletion.
        expected_version: When set, a stale version is rejected with a conflict.
    """

    family: str
    entity_id: UUID
    modified_by: UUID | None = None
    expected_version: int | None = None
