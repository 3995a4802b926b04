"""Application service: List Discounts use case (query)."""

from __future__ import annotations

from storefront.domain.model.discount import DiscountRule
from storefront.domain.repository.discount_repository import DiscountRepository


class ListDiscountsHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(
        self,
        active_only: bool = False,
        automatic: bool | None = None,
    ) -> list[DiscountRule]:
        rules = self._discount_repo.list_all()
        if active_only:
            rules = [r for r in rules if r.is_active]
        if automatic is not None:
            rules = [r for r in rules if r.is_automatic == automatic]
        return rules
