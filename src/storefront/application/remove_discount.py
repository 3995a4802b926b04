"""Application service: Remove Discount use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.discount_repository import DiscountRepository

logger = logging.getLogger(__name__)


class RemoveDiscountHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self, discount_id: str) -> None:
        if self._discount_repo.get_by_id(discount_id) is None:
            raise EntityNotFoundError(f"Discount '{discount_id}' not found")
        self._discount_repo.delete(discount_id)
        logger.info("Removed discount %s", discount_id)
