"""Invoice business entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from crm_core.domain.entities.base import Entity


@dataclass(kw_only=True)
class Invoice(Entity):
    """A bill issued to a company.

    Attributes:
        number: Invoice number (human-facing identifier).
        invoice_date: Issue date.
        invoice_status_id: InvoiceStatus reference.
        company_id: Billed company.
        sales_order_id: Sales order being invoiced, if any.
        due_date: Payment due date.
        total_amount: Invoice total.
    """

    number: str
    invoice_date: date
    invoice_status_id: UUID
    company_id: UUID | None = None
    sales_order_id: UUID | None = None
    due_date: date | None = None
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
        self._require_text(self.number, "Invoice number")
        if len(self.number) > 50:
            raise ValueError("Invoice number cannot exceed 50 characters")
        if self.due_date is not None and self.due_date < self.invoice_date:
            raise ValueError("Invoice due date cannot precede the invoice date")
        if self.total_amount < 0:
            raise ValueError("Invoice total cannot be negative")
