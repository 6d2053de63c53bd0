"""Sales order business entity and its owned line items.

A sales order owns its line items: they are created, replaced and
soft-deleted together with the order and are never addressed on their own.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from crm_core.domain.entities.base import Entity


@dataclass(kw_only=True)
class SalesOrderLineItem(Entity):
    """One ordered product line.

    Attributes:
        description: What is being sold.
        quantity: Ordered quantity (> 0).
        unit_price: Price per unit (>= 0).
        line_number: Position within the order (assigned when omitted).
        product_id: Product being sold, if catalogued.
        notes: Optional free text.
    """

    description: str
    quantity: Decimal = Decimal("1")
    unit_price: Decimal = Decimal("0.00")
    line_number: int | None = None
    product_id: UUID | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        self.quantity = self._as_decimal(self.quantity, "Quantity")
        self.unit_price = self._as_decimal(self.unit_price, "Unit price")
        super().__post_init__()

    def validate(self) -> None:
        """Validate quantity, price and line number.

        Raises:
            ValueError: If any invariant does not hold.
        """
        super().validate()
        self._require_text(self.description, "Line item description")
        if self.quantity <= 0:
            raise ValueError("Line item quantity must be positive")
        if self.unit_price < 0:
            raise ValueError("Line item unit price cannot be negative")
        if self.line_number is not None and self.line_number < 1:
            raise ValueError("Line number must be at least 1")

    @property
    def line_total(self) -> Decimal:
        """Quantity times unit price."""
        return self.quantity * self.unit_price


@dataclass(kw_only=True)
class SalesOrder(Entity):
    """A confirmed order from a company.

    Attributes:
        number: Order number.
        order_date: Date the order was placed.
        sales_order_status_id: SalesOrderStatus reference.
        ship_method_id: ShipMethod reference, if shipping applies.
        company_id: Ordering company.
        quote_id: Quote the order was converted from.
        due_date: Requested delivery date.
        ship_date: Actual ship date.
        line_items: Owned line items. Mappings are converted to
            SalesOrderLineItem on construction.
    """

    number: str
    order_date: date
    sales_order_status_id: UUID
    ship_method_id: UUID | None = None
    company_id: UUID | None = None
    quote_id: UUID | None = None
    due_date: date | None = None
    ship_date: date | None = None
    line_items: list[SalesOrderLineItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        author = self.modified_by if self.modified_by is not None else self.created_by
        items = [
            item
            if isinstance(item, SalesOrderLineItem)
            else SalesOrderLineItem(created_by=author, **item)
            for item in self.line_items
            if isinstance(item, (SalesOrderLineItem, Mapping))
        ]
        if len(items) != len(self.line_items):
            raise ValueError("Line items must be mappings or SalesOrderLineItem")

        next_number = max((i.line_number or 0 for i in items), default=0) + 1
        for item in items:
            if item.line_number is None:
                item.line_number = next_number
                next_number += 1
        self.line_items = items
        super().__post_init__()

    def validate(self) -> None:
        """Validate number, dates and line numbering.

        Raises:
            ValueError: If any invariant does not hold.
        """
        super().validate()
        self._require_text(self.number, "Sales order number")
        if len(self.number) > 50:
            raise ValueError("Sales order number cannot exceed 50 characters")
        if self.ship_date is not None and self.ship_date < self.order_date:
            raise ValueError("Sales order cannot ship before it is ordered")
        numbers = [item.line_number for item in self.line_items if item.active]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Line numbers must be unique within a sales order")

    @property
    def active_line_items(self) -> list[SalesOrderLineItem]:
        """Line items that have not been soft-deleted, by line number."""
        return sorted(
            (item for item in self.line_items if item.active),
            key=lambda item: item.line_number or 0,
        )

    @property
    def total_amount(self) -> Decimal:
        """Sum of the active line totals."""
        return sum(
            (item.line_total for item in self.line_items if item.active),
            Decimal("0.00"),
        )

    def apply_changes(
        self, changes: Mapping[str, Any], modified_by: UUID | None
    ) -> None:
        """Apply field changes. Replaced line items are kept soft-deleted.

        Items whose id appears in the new ``line_items`` stay as given. Every
        other item is retained, soft-deleted, ahead of the new ones.
        """
        previous = self.line_items
        super().apply_changes(changes, modified_by)
        if "line_items" not in changes:
            return
        kept = {item.id for item in self.line_items}
        superseded = [item for item in previous if item.id not in kept]
        for item in superseded:
            item.soft_delete(modified_by)
        self.line_items = [*superseded, *self.line_items]

    def soft_delete(self, modified_by: UUID | None) -> bool:
        """Soft-delete the order together with its line items."""
        deleted = super().soft_delete(modified_by)
        if deleted:
            for item in self.line_items:
                item.soft_delete(modified_by)
        return deleted
