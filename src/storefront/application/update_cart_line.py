"""Application service: change one cart line (increment / decrement / remove)."""

from __future__ import annotations

from enum import Enum

from storefront.application.lookups import require_customer
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository


class LineAction(Enum):
    INCREMENT = "increment"
    DECREMENT = "decrement"
    REMOVE = "remove"


class UpdateCartLineHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, product_id: str, action: LineAction) -> Cart:
        customer = require_customer(self._customer_repo, customer_id)
        cart = self._cart_repo.get_for_customer(customer.id)

        if action is LineAction.INCREMENT:
            cart.increment(product_id)
        elif action is LineAction.DECREMENT:
            cart.decrement(product_id)
        else:
            cart.remove(product_id)

        self._cart_repo.save(cart)
        return cart
