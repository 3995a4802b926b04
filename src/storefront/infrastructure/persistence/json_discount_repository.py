"""JSON-file-backed implementation of DiscountRepository.

Registry order is file order; it decides ties between equally good
automatic markdowns.
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.discount import DiscountRule
from storefront.domain.repository.discount_repository import DiscountRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonDiscountRepository(DiscountRepository):

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file = JsonFile(file_path, seed)

    # --- DiscountRepository interface -----------------------------------------

    def get_by_id(self, discount_id: str) -> DiscountRule | None:
        for raw in self._file.load():
            if raw["id"] == discount_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[DiscountRule]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, rule: DiscountRule) -> None:
        rules = self._file.load()

        # Upsert: replace in place to keep registry order, otherwise append
        for i, raw in enumerate(rules):
            if raw["id"] == rule.id:
                rules[i] = self._to_raw(rule)
                break
        else:
            rules.append(self._to_raw(rule))

        self._file.persist(rules)

    def delete(self, discount_id: str) -> None:
        self._file.persist([r for r in self._file.load() if r["id"] != discount_id])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(rule: DiscountRule) -> dict:
        return {
            "id": rule.id,
            "code": rule.code,
            "percentage": rule.percentage,
            "is_active": rule.is_active,
            "is_automatic": rule.is_automatic,
            "target_product_id": rule.target_product_id,
            "target_customer_id": rule.target_customer_id,
            "description": rule.description,
        }

    @staticmethod
    def _to_domain(raw: dict) -> DiscountRule:
        return DiscountRule(
            id=raw["id"],
            code=raw["code"],
            percentage=raw["percentage"],
            is_active=raw.get("is_active", True),
            is_automatic=raw.get("is_automatic", False),
            target_product_id=raw.get("target_product_id"),
            target_customer_id=raw.get("target_customer_id"),
            description=raw.get("description", ""),
        )
