"""Company business entity."""

from dataclasses import dataclass
from uuid import UUID

from crm_core.domain.entities.base import Entity


@dataclass(kw_only=True)
class Company(Entity):
    """A customer, prospect or partner organisation.

    Attributes:
        name: Company name (unique display name).
        account_type_id: AccountType reference.
        account_status_id: AccountStatus reference.
        description: Optional free text.
        parent_company_id: Parent company for subsidiaries.
        primary_contact_id: Person acting as primary contact.
        website: Optional website URL.
    """

    name: str
    account_type_id: UUID
    account_status_id: UUID
    description: str | None = None
    parent_company_id: UUID | None = None
    primary_contact_id: UUID | None = None
    website: str | None = None

    def validate(self) -> None:
        """Validate company fields.

        Raises:
            ValueError: If any invariant does not hold.
        """
        super().validate()
        self._require_text(self.name, "Company name")
        if len(self.name) > 100:
            raise ValueError("Company name cannot exceed 100 characters")
        if self.parent_company_id is not None and self.parent_company_id == self.id:
            raise ValueError("Company cannot be its own parent")
