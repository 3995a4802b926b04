"""Order aggregate: the immutable record of a checkout.

An Order is created once by the order materializer.  Its line items and
totals never change afterwards; only ``status`` moves, and only along the
transitions an administrator is allowed to trigger.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Union

from storefront.domain.exceptions import InvalidStatusTransition
from storefront.domain.model.value_objects import Money, Quantity

DEFAULT_PAYMENT_METHOD = "Cash on Delivery"


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product and price at checkout time (price lock)."""

    product_id: str
    product_code: str
    product_name: str
    brand: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


# ---------------------------------------------------------------------------
# Applied discount: a manual rule, or the aggregate of automatic markdowns
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ManualDiscount:
    rule_id: str
    code: str
    percentage: int
    description: str
    amount: Money

    @property
    def label(self) -> str:
        return f"{self.code} ({self.percentage}%)"


@dataclass(frozen=True)
class AutomaticSavings:
    amount: Money
    description: str = "Automatic Product Savings"

    @property
    def label(self) -> str:
        return "Automatic markdowns"


AppliedDiscount = Union[ManualDiscount, AutomaticSavings]


@dataclass
class Order:
    """Aggregate root for placed orders.

    Build new orders through ``OrderMaterializer``; the plain
    ``__init__`` is what repositories use to reconstitute stored orders.
    """

    id: str
    customer_id: str
    customer_name: str
    shipping_address: str
    items: list[OrderLineItem]
    subtotal: Money
    total: Money
    applied_discount: AppliedDiscount | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None
    payment_method: str = DEFAULT_PAYMENT_METHOD

    # --- State transitions ----------------------------------------------------

    def transition_to(self, new_status: OrderStatus) -> None:
        if new_status not in ALLOWED_TRANSITIONS[self.status]:
            raise InvalidStatusTransition(
                f"Cannot move order #{self.id} from {self.status.value} "
                f"to {new_status.value}"
            )
        self.status = new_status
        self.updated_at = datetime.now(timezone.utc)

    def start_processing(self) -> None:
        """Administrator confirmation: PENDING -> PROCESSING."""
        self.transition_to(OrderStatus.PROCESSING)

    def ship(self) -> None:
        self.transition_to(OrderStatus.SHIPPED)

    def deliver(self) -> None:
        self.transition_to(OrderStatus.DELIVERED)

    def cancel(self) -> None:
        """PENDING|PROCESSING -> CANCELLED."""
        self.transition_to(OrderStatus.CANCELLED)

    # --- Computed properties --------------------------------------------------

    @property
    def savings(self) -> Money:
        return self.subtotal.minus_clamped(self.total)

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    def matches(self, term: str) -> bool:
        """Search match on order id, customer name or any item name."""
        lowered = term.lower()
        return (
            lowered in self.id.lower()
            or lowered in self.customer_name.lower()
            or any(lowered in item.product_name.lower() for item in self.items)
        )
