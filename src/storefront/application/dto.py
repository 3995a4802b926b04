"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is pre-formatted
(e.g. "$15.00") the way the CLI prints it.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order

DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as a given customer sees it."""

    id: str
    code: str
    name: str
    brand: str
    category: str
    price: str
    stock: int
    markdown_percentage: int | None = None
    sale_price: str | None = None


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_subtotal: str
    saving: str
    markdown_code: str | None  # winning automatic rule label, if any


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart with a live price quote."""

    customer_id: str
    lines: list[CartLineDTO]
    applied_code: str | None
    item_count: int
    base_subtotal: str
    automatic_savings: str
    manual_savings: str
    total_savings: str
    total: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    customer_name: str
    shipping_address: str
    status: str
    items: list[OrderLineItemDTO]
    subtotal: str
    discount: str | None
    savings: str
    total: str
    payment_method: str
    created_at: str


@dataclass(frozen=True)
class DashboardDTO:
    total_revenue: str
    total_orders: int
    average_order_value: str
    pending_count: int
    pending_orders: list[OrderDTO]


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        customer_name=order.customer_name,
        shipping_address=order.shipping_address,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        subtotal=str(order.subtotal),
        discount=order.applied_discount.label if order.applied_discount else None,
        savings=str(order.savings),
        total=str(order.total),
        payment_method=order.payment_method,
        created_at=order.created_at.strftime(DATE_FORMAT),
    )
