"""Abstract repository for the discount registry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.discount import DiscountRule


class DiscountRepository(ABC):

    @abstractmethod
    def get_by_id(self, discount_id: str) -> DiscountRule | None:
        """Return a rule by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[DiscountRule]:
        """Return every rule in registry order."""

    @abstractmethod
    def save(self, rule: DiscountRule) -> None:
        """Persist a new or updated rule; new rules go to the end."""

    @abstractmethod
    def delete(self, discount_id: str) -> None:
        """Remove a rule from the registry."""
