"""Application service: Create Discount use case.

Two kinds of rule can be created:

- automatic: a markdown on one product, applied without any code;
- manual: a coupon code, optionally restricted to one customer and/or
  one product.  A customer-restricted coupon with no explicit code uses
  the customer's phone number as its code.
"""

from __future__ import annotations

import logging
import uuid

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.discount import DiscountRule
from storefront.domain.model.value_objects import validate_percentage
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.discount_repository import DiscountRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateDiscountHandler:

    def __init__(
        self,
        discount_repo: DiscountRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._discount_repo = discount_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(
        self,
        percentage: int,
        is_automatic: bool,
        code: str | None = None,
        target_product_id: str | None = None,
        target_customer_id: str | None = None,
        description: str | None = None,
    ) -> DiscountRule:
        validate_percentage(percentage)

        product_name = None
        if target_product_id:
            product = self._product_repo.get_by_id(target_product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product with ID '{target_product_id}' not found"
                )
            product_name = product.name

        if not description:
            if product_name:
                description = f"Admin Set: {percentage}% Discount on {product_name}"
            else:
                description = f"{percentage}% Shop-wide Discount"

        if is_automatic:
            if not target_product_id:
                raise ValidationError("Automatic discounts must target a product")
            rule = DiscountRule.automatic(
                id=self._next_id(),
                target_product_id=target_product_id,
                percentage=percentage,
                description=description,
            )
        else:
            code = self._manual_code(code, target_customer_id)
            rule = DiscountRule.manual(
                id=self._next_id(),
                code=code,
                percentage=percentage,
                description=description,
                target_product_id=target_product_id,
                target_customer_id=target_customer_id,
            )

        self._discount_repo.save(rule)
        logger.info(
            "Created %s discount %s (%s, %d%%)",
            "automatic" if rule.is_automatic else "manual",
            rule.id,
            rule.code,
            rule.percentage,
        )
        return rule

    # --- Internal helpers -----------------------------------------------------

    def _manual_code(self, code: str | None, target_customer_id: str | None) -> str:
        if target_customer_id:
            customer = self._customer_repo.get_by_id(target_customer_id)
            if customer is None:
                raise EntityNotFoundError(f"Customer '{target_customer_id}' not found")
            if not code:
                code = customer.phone

        if not code or not code.strip():
            raise ValidationError("Manual discounts require a code")

        for existing in self._discount_repo.list_all():
            if not existing.is_automatic and existing.code.casefold() == code.strip().casefold():
                raise ValidationError(f"Discount code '{code.strip().upper()}' already exists")
        return code

    def _next_id(self) -> str:
        return uuid.uuid4().hex[:9]
