"""Application service: quick product markdown.

Replaces every discount rule that targets the product with a single
automatic rule labelled ``AUTO-<product code>``.  A percentage of 0
just removes them.
"""

from __future__ import annotations

import logging
import uuid

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.discount import DiscountRule
from storefront.domain.model.value_objects import validate_percentage
from storefront.domain.repository.discount_repository import DiscountRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SetProductMarkdownHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
    ) -> None:
        self._product_repo = product_repo
        self._discount_repo = discount_repo

    def handle(self, product_id: str, percentage: int) -> DiscountRule | None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if percentage != 0:
            validate_percentage(percentage)

        for rule in self._discount_repo.list_all():
            if rule.target_product_id == product_id:
                self._discount_repo.delete(rule.id)

        if percentage == 0:
            logger.info("Cleared markdowns on product %s", product_id)
            return None

        rule = DiscountRule.automatic(
            id=uuid.uuid4().hex[:9],
            target_product_id=product.id,
            percentage=percentage,
            description=f"Admin Markdown: {percentage}% off {product.name}",
            label=f"AUTO-{product.code}",
        )
        self._discount_repo.save(rule)
        logger.info("Marked down product %s by %d%%", product_id, percentage)
        return rule
