"""Application service: Show Cart use case (query with a live quote).

If the stored discount code no longer resolves (the rule was removed or
deactivated since it was applied) the code is dropped and the cart is
priced without it.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.application.lookups import require_customer
from storefront.domain.exceptions import InvalidCode
from storefront.domain.model.cart import Cart
from storefront.domain.model.customer import Customer
from storefront.domain.model.discount import DiscountRule
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.discount_repository import DiscountRepository
from storefront.domain.service.pricing_engine import PricingEngine, PricingResult

logger = logging.getLogger(__name__)


class ShowCartHandler:

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

    def handle(self, customer_id: str) -> CartDTO:
        customer = require_customer(self._customer_repo, customer_id)
        cart = self._cart_repo.get_for_customer(customer.id)
        pricing = quote_cart(
            self._pricing, cart, self._discount_repo.list_all(), customer, self._cart_repo
        )
        return to_cart_dto(cart, pricing)


def quote_cart(
    engine: PricingEngine,
    cart: Cart,
    discounts: list[DiscountRule],
    customer: Customer,
    cart_repo: CartRepository,
) -> PricingResult:
    """Price *cart* with its stored code, dropping the code if it went stale."""
    try:
        return engine.compute_totals(cart.lines, discounts, customer, cart.applied_code)
    except InvalidCode:
        logger.warning(
            "Dropping stale discount code %r from cart of %s",
            cart.applied_code,
            customer.id,
        )
        cart.clear_code()
        cart_repo.save(cart)
        return engine.compute_totals(cart.lines, discounts, customer)


def to_cart_dto(cart: Cart, pricing: PricingResult) -> CartDTO:
    lines = []
    for line in cart.lines:
        saving = pricing.saving_for(line.product_id)
        lines.append(
            CartLineDTO(
                product_id=line.product_id,
                product_name=line.product.name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_subtotal=str(line.line_subtotal),
                saving=str(saving.amount) if saving else "$0.00",
                markdown_code=saving.rule.code if saving and saving.rule else None,
            )
        )

    return CartDTO(
        customer_id=cart.customer_id,
        lines=lines,
        applied_code=pricing.manual_rule.code if pricing.manual_rule else None,
        item_count=cart.item_count,
        base_subtotal=str(pricing.base_subtotal),
        automatic_savings=str(pricing.automatic_savings),
        manual_savings=str(pricing.manual_savings_amount),
        total_savings=str(pricing.total_savings),
        total=str(pricing.total),
    )
