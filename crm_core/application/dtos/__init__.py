"""Data Transfer Objects (DTOs) for the application layer.

Read projections returned by query and command handlers. They are never
stored; the mapper builds them from domain entities at query time.

Categories:
    - common: ProjectionKind, PagedResult, audit fields
    - reference_dtos: Projections shared by every reference family
    - business_dtos: Per-family business projections
"""

from crm_core.application.dtos.business_dtos import (
    ActivityDetails,
    ActivityListItem,
    ActivitySummary,
    CompanyDetails,
    CompanyListItem,
    CompanySummary,
    InvoiceDetails,
    InvoiceListItem,
    InvoiceSummary,
    PersonDetails,
    PersonListItem,
    PersonSummary,
    QuoteDetails,
    QuoteListItem,
    QuoteSummary,
    SalesOrderDetails,
    SalesOrderLineItemSummary,
    SalesOrderListItem,
    SalesOrderSummary,
)
from crm_core.application.dtos.common import AuditedDetails, PagedResult, ProjectionKind
from crm_core.application.dtos.reference_dtos import (
    ReferenceDetails,
    ReferenceListItem,
    ReferenceSummary,
)

__all__ = [
    # Common
    "AuditedDetails",
    "PagedResult",
    "ProjectionKind",
    # Reference
    "ReferenceDetails",
    "ReferenceListItem",
    "ReferenceSummary",
    # Business
    "ActivityDetails",
    "ActivityListItem",
    "ActivitySummary",
    "CompanyDetails",
    "CompanyListItem",
    "CompanySummary",
    "InvoiceDetails",
    "InvoiceListItem",
    "InvoiceSummary",
    "PersonDetails",
    "PersonListItem",
    "PersonSummary",
    "QuoteDetails",
    "QuoteListItem",
    "QuoteSummary",
    "SalesOrderDetails",
    "SalesOrderLineItemSummary",
    "SalesOrderListItem",
    "SalesOrderSummary",
]
