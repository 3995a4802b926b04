"""Application service: plain-text receipt for a placed order."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository

STORE_NAME = "Nova Hub"


class RenderReceiptHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> str:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return render_receipt(order)


def render_receipt(order: Order) -> str:
    lines = [
        f"Order Confirmation #{order.id} - {STORE_NAME}",
        "",
        f"Hello {order.customer_name},",
        "",
        "Your order has been placed successfully!",
        "",
        f"Order ID: #{order.id}",
        f"Date: {order.created_at.strftime('%d %b %Y, %I:%M:%S %p')}",
        f"Status: {order.status.value}",
        "",
        "Items:",
    ]
    for item in order.items:
        lines.append(f"- {item.product_name} ({item.quantity}x) : {item.line_total}")

    lines.append("")
    lines.append(f"Subtotal: {order.subtotal}")
    if order.applied_discount is not None:
        lines.append(f"Discount ({order.applied_discount.label}): -{order.savings}")
    lines.extend(
        [
            f"Total Amount: {order.total}",
            f"Payment: {order.payment_method}",
            f"Shipping Address: {order.shipping_address}",
            "",
            f"Thank you for shopping with {STORE_NAME}!",
        ]
    )
    return "\n".join(lines)
