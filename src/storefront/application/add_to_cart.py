"""Application service: Add To Cart use case.

A single product is added one unit at a time (incrementing an existing
line).  Several products at once is the bulk-add path, which leaves
products already in the cart untouched.
"""

from __future__ import annotations

import logging

from storefront.application.lookups import require_customer, require_product
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, product_ids: list[str]) -> Cart:
        customer = require_customer(self._customer_repo, customer_id)
        products = [require_product(self._product_repo, pid) for pid in product_ids]

        cart = self._cart_repo.get_for_customer(customer.id)
        if len(products) == 1:
            cart.add(products[0])
        else:
            cart.add_many(products)
        self._cart_repo.save(cart)

        logger.debug("Cart for %s now holds %d items", customer.id, cart.item_count)
        return cart
