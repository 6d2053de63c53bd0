"""Entity Family Registry - Single source of truth for every served family.

The generic handlers, the mapper, the request rule sets and the container
all read this catalog instead of hard-coding per-entity knowledge.

Registry Structure:
    - EntityFamily: Dataclass with family configuration (metadata.py)
    - FAMILY_REGISTRY: List of all family entries
    - Helper Functions: Lookup, usage sources and statistics

Usage:
    from crm_core.domain.families import get_family, get_usage_sources

    family = get_family("account_type")
    sources = get_usage_sources("account_type")
    # [UsageSource(family="company", field="account_type_id")]
"""

from crm_core.domain.entities import (
    AccountStatus,
    AccountType,
    Activity,
    ActivityStatus,
    ActivityType,
    AddressType,
    CallDirection,
    CallType,
    Company,
    EmailAddressType,
    Invoice,
    InvoiceStatus,
    NoteType,
    PaymentMethod,
    PaymentStatus,
    Person,
    PersonStatus,
    PersonType,
    PhoneType,
    ProductType,
    Quote,
    QuoteStatus,
    SalesOrder,
    SalesOrderStatus,
    ServiceType,
    ShipMethod,
)
from crm_core.domain.families.metadata import EntityFamily, EntityKind, UsageSource


def _reference(name: str, entity_class: type, description: str) -> EntityFamily:
    return EntityFamily(
        name=name,
        entity_class=entity_class,
        kind=EntityKind.REFERENCE,
        description=description,
        search_fields=("label", "description"),
    )


# =============================================================================
# Family Registry
# =============================================================================

FAMILY_REGISTRY: list[EntityFamily] = [
    # -------------------------------------------------------------------------
    # Reference families
    # -------------------------------------------------------------------------
    _reference("account_type", AccountType, "Kind of customer account"),
    _reference("account_status", AccountStatus, "Lifecycle status of an account"),
    _reference("activity_type", ActivityType, "Kind of activity"),
    _reference("activity_status", ActivityStatus, "Progress status of an activity"),
    _reference("address_type", AddressType, "Kind of address"),
    _reference("call_direction", CallDirection, "Inbound or outbound call"),
    _reference("call_type", CallType, "Kind of phone call"),
    _reference("email_address_type", EmailAddressType, "Kind of email address"),
    _reference("invoice_status", InvoiceStatus, "Billing status of an invoice"),
    _reference("note_type", NoteType, "Kind of note"),
    _reference("payment_method", PaymentMethod, "How a payment was made"),
    _reference("payment_status", PaymentStatus, "Settlement status of a payment"),
    _reference("person_status", PersonStatus, "Relationship status of a person"),
    _reference("person_type", PersonType, "Role of a person"),
    _reference("phone_type", PhoneType, "Kind of phone number"),
    _reference("product_type", ProductType, "Kind of product"),
    _reference("quote_status", QuoteStatus, "Progress status of a quote"),
    _reference("sales_order_status", SalesOrderStatus, "Fulfilment status of an order"),
    _reference("service_type", ServiceType, "Kind of service"),
    _reference("ship_method", ShipMethod, "Shipping carrier or method"),
    # -------------------------------------------------------------------------
    # Business families
    # -------------------------------------------------------------------------
    EntityFamily(
        name="person",
        entity_class=Person,
        kind=EntityKind.BUSINESS,
        description="Contact or lead",
        reference_fields={
            "person_type_id": "person_type",
            "person_status_id": "person_status",
        },
        filterable_fields=frozenset(
            {"person_type_id", "person_status_id", "company_id", "last_name"}
        ),
        search_fields=("first_name", "last_name", "title"),
    ),
    EntityFamily(
        name="company",
        entity_class=Company,
        kind=EntityKind.BUSINESS,
        description="Customer, prospect or partner organisation",
        reference_fields={
            "account_type_id": "account_type",
            "account_status_id": "account_status",
        },
        filterable_fields=frozenset(
            {
                "account_type_id",
                "account_status_id",
                "parent_company_id",
                "primary_contact_id",
            }
        ),
        search_fields=("name", "description", "website"),
    ),
    EntityFamily(
        name="activity",
        entity_class=Activity,
        kind=EntityKind.BUSINESS,
        description="Call, meeting or task",
        reference_fields={
            "activity_type_id": "activity_type",
            "activity_status_id": "activity_status",
        },
        filterable_fields=frozenset(
            {"activity_type_id", "activity_status_id", "company_id", "person_id"}
        ),
        date_fields=frozenset({"due_at", "started_at", "completed_at"}),
        search_fields=("subject", "description"),
    ),
    EntityFamily(
        name="invoice",
        entity_class=Invoice,
        kind=EntityKind.BUSINESS,
        description="Bill issued to a company",
        reference_fields={"invoice_status_id": "invoice_status"},
        filterable_fields=frozenset(
            {"invoice_status_id", "company_id", "sales_order_id", "number"}
        ),
        date_fields=frozenset({"invoice_date", "due_date"}),
        search_fields=("number",),
    ),
    EntityFamily(
        name="quote",
        entity_class=Quote,
        kind=EntityKind.BUSINESS,
        description="Price proposal",
        reference_fields={"quote_status_id": "quote_status"},
        filterable_fields=frozenset({"quote_status_id", "company_id", "number"}),
        date_fields=frozenset({"quote_date", "valid_until"}),
        search_fields=("number",),
    ),
    EntityFamily(
        name="sales_order",
        entity_class=SalesOrder,
        kind=EntityKind.BUSINESS,
        description="Confirmed order with owned line items",
        reference_fields={
            "sales_order_status_id": "sales_order_status",
            "ship_method_id": "ship_method",
        },
        filterable_fields=frozenset(
            {
                "sales_order_status_id",
                "ship_method_id",
                "company_id",
                "quote_id",
                "number",
            }
        ),
        date_fields=frozenset({"order_date", "due_date", "ship_date"}),
        search_fields=("number",),
    ),
]

_FAMILIES_BY_NAME: dict[str, EntityFamily] = {f.name: f for f in FAMILY_REGISTRY}


# =============================================================================
# Helper Functions
# =============================================================================


def get_family(name: str) -> EntityFamily | None:
    """Get family metadata by name.

    Args:
        name: Family key (e.g. "account_type").

    Returns:
        EntityFamily if registered, None otherwise.
    """
    return _FAMILIES_BY_NAME.get(name)


def require_family(name: str) -> EntityFamily:
    """Get family metadata by name, failing loudly when unknown.

    Handlers call this after validation has already checked the name,
    so a miss here is a programming error.

    Args:
        name: Family key.

    Returns:
        EntityFamily: The registered family.

    Raises:
        KeyError: If the family is not registered.
    """
    family = _FAMILIES_BY_NAME.get(name)
    if family is None:
        raise KeyError(f"Entity family not registered: {name}")
    return family


def get_family_names(kind: EntityKind | None = None) -> list[str]:
    """Get registered family names, optionally filtered by kind.

    Args:
        kind: REFERENCE, BUSINESS, or None for all.

    Returns:
        Family names in registry order.
    """
    return [f.name for f in FAMILY_REGISTRY if kind is None or f.kind == kind]


def get_family_for_class(entity_class: type) -> EntityFamily | None:
    """Get the family whose entity class is exactly ``entity_class``."""
    for family in FAMILY_REGISTRY:
        if family.entity_class is entity_class:
            return family
    return None


def get_usage_sources(reference_family: str) -> list[UsageSource]:
    """Business fields that reference the given reference family.

    Derived from every business family's ``reference_fields`` so usage
    counts are computed the same way for every reference family.

    Args:
        reference_family: Reference family key.

    Returns:
        Usage sources; empty when no business family references it.
    """
    return [
        UsageSource(family=family.name, field=attribute)
        for family in FAMILY_REGISTRY
        for attribute, target in family.reference_fields.items()
        if target == reference_family
    ]


def get_statistics() -> dict[str, int]:
    """Get registry statistics.

    Returns:
        Dictionary with total, reference and business family counts.
    """
    reference = sum(1 for f in FAMILY_REGISTRY if f.is_reference)
    return {
        "total_families": len(FAMILY_REGISTRY),
        "reference_families": reference,
        "business_families": len(FAMILY_REGISTRY) - reference,
    }
