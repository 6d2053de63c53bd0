"""Entity family metadata types.

A family is one entity type (account_type, company, ...) plus the
configuration the generic pipeline needs to serve it: which fields point at
reference families, which fields are filterable, searchable or date-ranged.
"""

from dataclasses import dataclass, field
from enum import Enum

from crm_core.domain.entities.base import Entity
from crm_core.domain.entities.reference import ReferenceEntity


class EntityKind(str, Enum):
    """Whether a family is a lookup value or a substantive record."""

    REFERENCE = "reference"  # Types, statuses, directions, methods
    BUSINESS = "business"  # People, companies, invoices, ...


@dataclass(frozen=True, kw_only=True)
class UsageSource:
    """A business field that points at a reference family.

    Attributes:
        family: Business family holding the reference.
        field: Attribute on that family holding the reference id.
    """

    family: str
    field: str


@dataclass(frozen=True, kw_only=True)
class EntityFamily:
    """Metadata for one entity family in the registry.

    Attributes:
        name: Family key used in requests (snake_case, e.g. "account_type").
        entity_class: Entity dataclass for the family.
        kind: REFERENCE or BUSINESS.
        description: Human-readable description for documentation.
        reference_fields: Attribute -> referenced reference family.
        filterable_fields: Attributes allowed in ListEntitiesByField.
        date_fields: Attributes allowed in ListEntitiesByDateRange.
        search_fields: Attributes matched by SearchEntities.
    """

    name: str
    entity_class: type[Entity]
    kind: EntityKind
    description: str = ""
    reference_fields: dict[str, str] = field(default_factory=dict)
    filterable_fields: frozenset[str] = frozenset()
    date_fields: frozenset[str] = frozenset()
    search_fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        is_reference_class = issubclass(self.entity_class, ReferenceEntity)
        if is_reference_class != (self.kind == EntityKind.REFERENCE):
            raise ValueError(
                f"Family {self.name} kind {self.kind.value} does not match "
                f"{self.entity_class.__name__}"
            )
        declared = (
            set(self.reference_fields)
            | self.filterable_fields
            | self.date_fields
            | set(self.search_fields)
        )
        unknown = declared - self.entity_class.writable_fields()
        if unknown:
            raise ValueError(
                f"Family {self.name} declares unknown fields: {sorted(unknown)}"
            )

    @property
    def is_reference(self) -> bool:
        """True for lookup families (ordinal position, default selection)."""
        return self.kind == EntityKind.REFERENCE
