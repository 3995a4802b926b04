"""Abstract repository for carts, one per customer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_for_customer(self, customer_id: str) -> Cart:
        """Return the customer's cart; a new empty one if none is stored."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart, replacing any stored one for the same customer."""
