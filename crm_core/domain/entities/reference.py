"""Reference (lookup) entities.

Small, low-cardinality values a business entity points at: types, statuses,
directions and methods. Each family carries a label, an optional description
and an ordinal position used for display order and default selection.
"""

from dataclasses import dataclass
from typing import ClassVar

from crm_core.domain.entities.base import Entity


@dataclass(kw_only=True)
class ReferenceEntity(Entity):
    """Base class for every reference family.

    Attributes:
        label: Type/status/direction/method name (unique among active members).
        description: Optional longer description for UI display.
        ordinal_position: Display order; lowest active position is the default.
    """

    MAX_LABEL_LENGTH: ClassVar[int] = 50
    MAX_DESCRIPTION_LENGTH: ClassVar[int] = 500

    label: str
    description: str | None = None
    ordinal_position: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.label, str):
            self.label = self.label.strip()
        super().__post_init__()

    def validate(self) -> None:
        """Validate label, description and ordinal position.

        Raises:
            ValueError: If any invariant does not hold.
        """
        super().validate()
        self._require_text(self.label, "Label")
        if len(self.label) > self.MAX_LABEL_LENGTH:
            raise ValueError(
                f"Label cannot exceed {self.MAX_LABEL_LENGTH} characters"
            )
        if (
            self.description is not None
            and len(self.description) > self.MAX_DESCRIPTION_LENGTH
        ):
            raise ValueError(
                f"Description cannot exceed {self.MAX_DESCRIPTION_LENGTH} characters"
            )
        if isinstance(self.ordinal_position, bool) or not isinstance(
            self.ordinal_position, int
        ):
            raise ValueError("Ordinal position must be an integer")
        if self.ordinal_position < 0:
            raise ValueError("Ordinal position must be a non-negative number")


@dataclass(kw_only=True)
class AccountType(ReferenceEntity):
    """Kind of customer account (prospect, customer, partner)."""


@dataclass(kw_only=True)
class AccountStatus(ReferenceEntity):
    """Lifecycle status of a customer account."""


@dataclass(kw_only=True)
class ActivityType(ReferenceEntity):
    """Kind of activity (call, meeting, task)."""


@dataclass(kw_only=True)
class ActivityStatus(ReferenceEntity):
    """Progress status of an activity."""


@dataclass(kw_only=True)
class AddressType(ReferenceEntity):
    """Kind of address (billing, shipping)."""


@dataclass(kw_only=True)
class CallDirection(ReferenceEntity):
    """Inbound or outbound."""


@dataclass(kw_only=True)
class CallType(ReferenceEntity):
    """Kind of phone call."""


@dataclass(kw_only=True)
class EmailAddressType(ReferenceEntity):
    """Kind of email address (work, personal)."""


@dataclass(kw_only=True)
class InvoiceStatus(ReferenceEntity):
    """Billing status of an invoice."""


@dataclass(kw_only=True)
class NoteType(ReferenceEntity):
    """Kind of note."""


@dataclass(kw_only=True)
class PaymentMethod(ReferenceEntity):
    """How a payment was made."""


@dataclass(kw_only=True)
class PaymentStatus(ReferenceEntity):
    """Settlement status of a payment."""


@dataclass(kw_only=True)
class PersonStatus(ReferenceEntity):
    """Relationship status of a person."""


@dataclass(kw_only=True)
class PersonType(ReferenceEntity):
    """Role of a person (contact, lead)."""


@dataclass(kw_only=True)
class PhoneType(ReferenceEntity):
    """Kind of phone number (mobile, office)."""


@dataclass(kw_only=True)
class ProductType(ReferenceEntity):
    """Kind of product."""


@dataclass(kw_only=True)
class QuoteStatus(ReferenceEntity):
    """Progress status of a quote."""


@dataclass(kw_only=True)
class SalesOrderStatus(ReferenceEntity):
    """Fulfilment status of a sales order."""


@dataclass(kw_only=True)
class ServiceType(ReferenceEntity):
    """Kind of service."""


@dataclass(kw_only=True)
class ShipMethod(ReferenceEntity):
    """Shipping carrier or method."""
