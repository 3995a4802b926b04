"""Application service: Remove Product use case.

Discount rules that target the product are removed with it so the
registry never points at a product that no longer exists.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.discount_repository import DiscountRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
    ) -> None:
        self._product_repo = product_repo
        self._discount_repo = discount_repo

    def handle(self, product_id: str) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        for rule in self._discount_repo.list_all():
            if rule.target_product_id == product_id:
                self._discount_repo.delete(rule.id)
                logger.info("Removed discount %s with product %s", rule.id, product_id)

        self._product_repo.delete(product_id)
        logger.info("Removed product %s", product_id)
