"""Domain entities.

Exports the entity base classes and every concrete family.
"""

from crm_core.domain.entities.activity import Activity
from crm_core.domain.entities.base import Entity
from crm_core.domain.entities.company import Company
from crm_core.domain.entities.invoice import Invoice
from crm_core.domain.entities.person import Person
from crm_core.domain.entities.quote import Quote
from crm_core.domain.entities.reference import (
    AccountStatus,
    AccountType,
    ActivityStatus,
    ActivityType,
    AddressType,
    CallDirection,
    CallType,
    EmailAddressType,
    InvoiceStatus,
    NoteType,
    PaymentMethod,
    PaymentStatus,
    PersonStatus,
    PersonType,
    PhoneType,
    ProductType,
    QuoteStatus,
    ReferenceEntity,
    SalesOrderStatus,
    ServiceType,
    ShipMethod,
)
from crm_core.domain.entities.sales_order import SalesOrder, SalesOrderLineItem

__all__ = [
    # Base classes
    "Entity",
    "ReferenceEntity",
    # Reference families
    "AccountStatus",
    "AccountType",
    "ActivityStatus",
    "ActivityType",
    "AddressType",
    "CallDirection",
    "CallType",
    "EmailAddressType",
    "InvoiceStatus",
    "NoteType",
    "PaymentMethod",
    "PaymentStatus",
    "PersonStatus",
    "PersonType",
    "PhoneType",
    "ProductType",
    "QuoteStatus",
    "SalesOrderStatus",
    "ServiceType",
    "ShipMethod",
    # Business families
    "Activity",
    "Company",
    "Invoice",
    "Person",
    "Quote",
    "SalesOrder",
    "SalesOrderLineItem",
]
