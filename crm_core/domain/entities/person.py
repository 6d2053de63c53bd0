"""Person business entity."""

from dataclasses import dataclass
from uuid import UUID

from crm_core.domain.entities.base import Entity


@dataclass(kw_only=True)
class Person(Entity):
    """A contact or lead.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        middle_initial: Optional single-letter middle initial.
        title: Optional job title.
        person_type_id: PersonType reference.
        person_status_id: PersonStatus reference.
        company_id: Primary employer (Company), if any.
    """

    first_name: str
    last_name: str
    middle_initial: str | None = None
    title: str | None = None
    person_type_id: UUID | None = None
    person_status_id: UUID | None = None
    company_id: UUID | None = None

    def validate(self) -> None:
        """Validate name fields.

        Raises:
            ValueError: If any invariant does not hold.
        """
        super().validate()
        self._require_text(self.first_name, "First name")
        self._require_text(self.last_name, "Last name")
        if len(self.first_name) > 100 or len(self.last_name) > 100:
            raise ValueError("Names cannot exceed 100 characters")
        if self.middle_initial is not None and len(self.middle_initial) > 1:
            raise ValueError("Middle initial must be a single character")

    @property
    def full_name(self) -> str:
        """Display name: first, optional middle initial, last."""
        if self.middle_initial:
            return f"{self.first_name} {self.middle_initial}. {self.last_name}"
        return f"{self.first_name} {self.last_name}"
