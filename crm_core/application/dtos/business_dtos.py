"""Business family projections.

Fields named ``<reference>_name`` hold the label of the reference entity
whose id is in ``<reference>_id``; the mapper resolves them at query time.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from crm_core.application.dtos.common import AuditedDetails

# =============================================================================
# Person
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class PersonSummary:
    id: UUID
    full_name: str


@dataclass(frozen=True, kw_only=True)
class PersonListItem:
    id: UUID
    first_name: str
    last_name: str
    title: str | None
    person_status_name: str | None
    active: bool


@dataclass(frozen=True, kw_only=True)
class PersonDetails(AuditedDetails):
    id: UUID
    first_name: str
    last_name: str
    middle_initial: str | None
    full_name: str
    title: str | None
    person_type_id: UUID | None
    person_type_name: str | None
    person_status_id: UUID | None
    person_status_name: str | None
    company_id: UUID | None


# =============================================================================
# Company
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class CompanySummary:
    id: UUID
    name: str


@dataclass(frozen=True, kw_only=True)
class CompanyListItem:
    id: UUID
    name: str
    account_type_name: str | None
    account_status_name: str | None
    active: bool


@dataclass(frozen=True, kw_only=True)
class CompanyDetails(AuditedDetails):
    id: UUID
    name: str
    description: str | None
    website: str | None
    account_type_id: UUID
    account_type_name: str | None
    account_status_id: UUID
    account_status_name: str | None
    parent_company_id: UUID | None
    primary_contact_id: UUID | None


# =============================================================================
# Activity
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ActivitySummary:
    id: UUID
    subject: str
    due_at: datetime | None
    is_completed: bool


@dataclass(frozen=True, kw_only=True)
class ActivityListItem:
    id: UUID
    subject: str
    activity_type_name: str | None
    activity_status_name: str | None
    due_at: datetime | None
    active: bool


@dataclass(frozen=True, kw_only=True)
class ActivityDetails(AuditedDetails):
    id: UUID
    subject: str
    description: str | None
    activity_type_id: UUID
    activity_type_name: str | None
    activity_status_id: UUID
    activity_status_name: str | None
    company_id: UUID | None
    person_id: UUID | None
    due_at: datetime | None
    started_at: datetime | None
    completed_at: datetime | None
    is_completed: bool


# =============================================================================
# Invoice / Quote
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class InvoiceSummary:
    id: UUID
    number: str
    invoice_date: date
    total_amount: Decimal


@dataclass(frozen=True, kw_only=True)
class InvoiceListItem:
    id: UUID
    number: str
    invoice_date: date
    due_date: date | None
    invoice_status_name: str | None
    total_amount: Decimal
    active: bool


@dataclass(frozen=True, kw_only=True)
class InvoiceDetails(AuditedDetails):
    id: UUID
    number: str
    invoice_date: date
    due_date: date | None
    invoice_status_id: UUID
    invoice_status_name: str | None
    company_id: UUID | None
    sales_order_id: UUID | None
    total_amount: Decimal


@dataclass(frozen=True, kw_only=True)
class QuoteSummary:
    id: UUID
    number: str
    quote_date: date
    total_amount: Decimal


@dataclass(frozen=True, kw_only=True)
class QuoteListItem:
    id: UUID
    number: str
    quote_date: date
    valid_until: date | None
    quote_status_name: str | None
    total_amount: Decimal
    active: bool


@dataclass(frozen=True, kw_only=True)
class QuoteDetails(AuditedDetails):
    id: UUID
    number: str
    quote_date: date
    valid_until: date | None
    quote_status_id: UUID
    quote_status_name: str | None
    company_id: UUID | None
    total_amount: Decimal


# =============================================================================
# Sales order
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class SalesOrderLineItemSummary:
    id: UUID
    line_number: int | None
    description: str
    quantity: Decimal
    unit_price: Decimal
    line_total: Decimal
    product_id: UUID | None


@dataclass(frozen=True, kw_only=True)
class SalesOrderSummary:
    id: UUID
    number: str
    order_date: date
    total_amount: Decimal


@dataclass(frozen=True, kw_only=True)
class SalesOrderListItem:
    id: UUID
    number: str
    order_date: date
    sales_order_status_name: str | None
    total_amount: Decimal
    active: bool


@dataclass(frozen=True, kw_only=True)
class SalesOrderDetails(AuditedDetails):
    """Sales order with its active line items.

    Attributes:
        active_line_items: Active line items (summary projection), in line order.
        line_item_count: Number of active line items.
    """

    id: UUID
    number: str
    order_date: date
    due_date: date | None
    ship_date: date | None
    sales_order_status_id: UUID
    sales_order_status_name: str | None
    ship_method_id: UUID | None
    ship_method_name: str | None
    company_id: UUID | None
    quote_id: UUID | None
    total_amount: Decimal
    active_line_items: tuple[SalesOrderLineItemSummary, ...]
    line_item_count: int
