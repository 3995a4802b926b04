"""JSON-file-backed implementation of CartRepository.

Cart lines store a full product snapshot, so a cart reads back exactly
as it was filled even if the catalog changed in between.
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_product_repository import (
    product_from_raw,
    product_to_raw,
)
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_for_customer(self, customer_id: str) -> Cart:
        for raw in self._file.load():
            if raw["customer_id"] == customer_id:
                return self._to_domain(raw)
        return Cart(customer_id=customer_id)

    def save(self, cart: Cart) -> None:
        carts = [c for c in self._file.load() if c["customer_id"] != cart.customer_id]
        if not cart.is_empty or cart.applied_code:
            carts.append(self._to_raw(cart))
        self._file.persist(carts)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "customer_id": cart.customer_id,
            "applied_code": cart.applied_code,
            "lines": [
                {"product": product_to_raw(line.product), "quantity": line.quantity.value}
                for line in cart.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            customer_id=raw["customer_id"],
            applied_code=raw.get("applied_code"),
            lines=[
                CartLine(product_from_raw(line["product"]), Quantity(line["quantity"]))
                for line in raw.get("lines", [])
            ],
        )
