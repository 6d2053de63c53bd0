"""Quote business entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from crm_core.domain.entities.base import Entity


@dataclass(kw_only=True)
class Quote(Entity):
    """A price proposal sent to a company.

    Attributes:
        number: Quote number.
        quote_date: Issue date.
        quote_status_id: QuoteStatus reference.
        company_id: Quoted company.
        valid_until: Last day the quote can be accepted.
        total_amount: Quoted total.
    """

    number: str
    quote_date: date
    quote_status_id: UUID
    company_id: UUID | None = None
    valid_until: date | None = None
    total_amount: Decimal = Decimal("0.00")

    def __post_init__(self) -> None:
        self.total_amount = self._as_decimal(self.total_amount, "Total amount")
        super().__post_init__()

    def validate(self) -> None:
        """Validate number, dates and amount.

        Raises:
            ValueError: If any invariant does not hold.
        """
        super().validate()
        self._require_text(self.number, "Quote number")
        if len(self.number) > 50:
            raise ValueError("Quote number cannot exceed 50 characters")
        if self.valid_until is not None and self.valid_until < self.quote_date:
            raise ValueError("Quote cannot expire before it is issued")
        if self.total_amount < 0:
            raise ValueError("Quote total cannot be negative")
