"""Application service: activate or deactivate a discount rule.

Inactive rules stay in the registry but are invisible to pricing.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.discount import DiscountRule
from storefront.domain.repository.discount_repository import DiscountRepository

logger = logging.getLogger(__name__)


class ToggleDiscountHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self, discount_id: str, active: bool) -> DiscountRule:
        rule = self._discount_repo.get_by_id(discount_id)
        if rule is None:
            raise EntityNotFoundError(f"Discount '{discount_id}' not found")

        if active:
            rule.activate()
        else:
            rule.deactivate()
        self._discount_repo.save(rule)
        logger.info("Discount %s is now %s", discount_id, "active" if active else "inactive")
        return rule
