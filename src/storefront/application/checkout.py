"""Application service: Checkout use case.

Steps:
1. Price the customer's cart with its applied code (a code that stopped
   resolving is dropped, as when showing the cart).
2. Materialize an immutable Order (PENDING) from the priced cart.
3. Persist the order, then clear the cart.

Order ids are random; an id already taken by a stored order is
regenerated before saving.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.application.lookups import require_customer
from storefront.application.show_cart import quote_cart
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.discount_repository import DiscountRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_materializer import OrderMaterializer
from storefront.domain.service.pricing_engine import PricingEngine

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 20


class CheckoutHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        discount_repo: DiscountRepository,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
        pricing_engine: PricingEngine | None = None,
        materializer: OrderMaterializer | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._discount_repo = discount_repo
        self._customer_repo = customer_repo
        self._order_repo = order_repo
        self._pricing = pricing_engine or PricingEngine()
        self._materializer = materializer or OrderMaterializer()

    def handle(self, customer_id: str, shipping_address: str) -> OrderDTO:
        customer = require_customer(self._customer_repo, customer_id)
        cart = self._cart_repo.get_for_customer(customer.id)

        pricing = quote_cart(
            self._pricing, cart, self._discount_repo.list_all(), customer, self._cart_repo
        )

        for _ in range(MAX_ID_ATTEMPTS):
            order = self._materializer.materialize(
                cart.lines, pricing, customer, shipping_address
            )
            if not self._order_repo.exists(order.id):
                break
            logger.debug("Order id %s already taken, regenerating", order.id)
        else:
            raise ValidationError("Could not allocate a free order ID")

        self._order_repo.save(order)
        cart.clear()
        self._cart_repo.save(cart)

        logger.info(
            "Order #%s placed by %s for %s", order.id, customer.id, order.total
        )
        return to_order_dto(order)
