"""Projection profiles: which DTO class each entity class maps to.

Reference families share one set of projections, registered against
ReferenceEntity and found through the class MRO.
"""

from crm_core.application.dtos import (
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
    ProjectionKind,
    QuoteDetails,
    QuoteListItem,
    QuoteSummary,
    ReferenceDetails,
    ReferenceListItem,
    ReferenceSummary,
    SalesOrderDetails,
    SalesOrderLineItemSummary,
    SalesOrderListItem,
    SalesOrderSummary,
)
from crm_core.domain.entities import (
    Activity,
    Company,
    Entity,
    Invoice,
    Person,
    Quote,
    ReferenceEntity,
    SalesOrder,
    SalesOrderLineItem,
)

S = ProjectionKind.SUMMARY
L = ProjectionKind.LIST
D = ProjectionKind.DETAILS

PROJECTION_PROFILES: dict[type[Entity], dict[ProjectionKind, type]] = {
    ReferenceEntity: {S: ReferenceSummary, L: ReferenceListItem, D: ReferenceDetails},
    Person: {S: PersonSummary, L: PersonListItem, D: PersonDetails},
    Company: {S: CompanySummary, L: CompanyListItem, D: CompanyDetails},
    Activity: {S: ActivitySummary, L: ActivityListItem, D: ActivityDetails},
    Invoice: {S: InvoiceSummary, L: InvoiceListItem, D: InvoiceDetails},
    Quote: {S: QuoteSummary, L: QuoteListItem, D: QuoteDetails},
    SalesOrder: {S: SalesOrderSummary, L: SalesOrderListItem, D: SalesOrderDetails},
    SalesOrderLineItem: {S: SalesOrderLineItemSummary},
}


def get_projection(entity_class: type, projection: ProjectionKind) -> type | None:
    """DTO class for an entity class and projection tier.

    Args:
        entity_class: Entity class (subclasses inherit their base's profile).
        projection: Requested projection tier.

    Returns:
        DTO class, or None if the class has no such projection.
    """
    for klass in entity_class.__mro__:
        profile = PROJECTION_PROFILES.get(klass)
        if profile is not None:
            return profile.get(projection)
    return None
