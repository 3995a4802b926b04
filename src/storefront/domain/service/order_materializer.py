"""Domain service: Order Materializer.

Snapshots a priced cart into an immutable Order at checkout.  It neither
persists the order nor clears the cart; the checkout use case does both.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Callable, Sequence

from storefront.domain.exceptions import EmptyCart, MissingShippingAddress
from storefront.domain.model.cart import CartLine
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.service.pricing_engine import PricingResult


def random_order_id() -> str:
    """Six-digit numeric id.  Low collision odds, not guaranteed unique."""
    return str(random.randint(100000, 999999))


class OrderMaterializer:

    def __init__(self, id_generator: Callable[[], str] = random_order_id) -> None:
        self._id_generator = id_generator

    def materialize(
        self,
        lines: Sequence[CartLine],
        pricing: PricingResult,
        customer: Customer,
        shipping_address: str,
    ) -> Order:
        if not lines:
            raise EmptyCart("Cannot check out an empty cart")
        if not shipping_address or not shipping_address.strip():
            raise MissingShippingAddress("A shipping address is required")

        items = [
            OrderLineItem(
                product_id=line.product.id,
                product_code=line.product.code,
                product_name=line.product.name,
                brand=line.product.brand,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            for line in lines
        ]

        return Order(
            id=self._id_generator(),
            customer_id=customer.id,
            customer_name=customer.name,
            shipping_address=shipping_address.strip(),
            items=items,
            subtotal=pricing.base_subtotal,
            total=pricing.total,
            applied_discount=pricing.applied_discount,
            status=OrderStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )
