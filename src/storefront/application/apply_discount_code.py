"""Application service: Apply Discount Code use case.

The code is resolved first; only when it resolves is it stored on the
cart, replacing any earlier code.  On InvalidCode the cart and its total
are left exactly as they were and the error propagates to the caller.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartDTO
from storefront.application.lookups import require_customer
from storefront.application.show_cart import to_cart_dto
from storefront.domain.exceptions import InvalidCode
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.discount_repository import DiscountRepository
from storefront.domain.service.pricing_engine import PricingEngine

logger = logging.getLogger(__name__)


class ApplyDiscountCodeHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        discount_repo: DiscountRepository,
        customer_repo: CustomerRepository,
        pricing_engine: PricingEngine | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._discount_repo = discount_repo
        self._customer_repo = customer_repo
        self._pricing = pricing_engine or PricingEngine()

    def handle(self, customer_id: str, code: str) -> CartDTO:
        customer = require_customer(self._customer_repo, customer_id)
        cart = self._cart_repo.get_for_customer(customer.id)
        discounts = self._discount_repo.list_all()

        try:
            rule = self._pricing.resolve_code(code, discounts, customer)
        except InvalidCode:
            logger.warning("Rejected discount code %r for %s", code, customer.id)
            raise

        pricing = self._pricing.compute_totals(cart.lines, discounts, customer, rule.code)
        cart.apply_code(rule.code)
        self._cart_repo.save(cart)
        logger.info("Applied code %s for %s", rule.code, customer.id)
        return to_cart_dto(cart, pricing)
