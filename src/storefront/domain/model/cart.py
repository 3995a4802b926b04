"""Cart aggregate: one shopper's pending selection.

The cart is keyed by product id and keeps insertion order.  Lines are
removed, never zeroed, when their quantity drops to 0.  At most one
manual discount code is attached at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """A product snapshot plus how many of it the shopper wants."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def unit_price(self) -> Money:
        return self.product.price

    @property
    def line_subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Cart:

    customer_id: str
    lines: list[CartLine] = field(default_factory=list)
    applied_code: str | None = None

    # --- Line operations ------------------------------------------------------

    def add(self, product: Product) -> None:
        """Add one unit, creating the line if needed."""
        line = self.find(product.id)
        if line is None:
            self.lines.append(CartLine(product.snapshot(), Quantity(1)))
        else:
            line.quantity = Quantity(line.quantity.value + 1)

    def add_many(self, products: list[Product]) -> None:
        """Bulk add: products already in the cart keep their quantity."""
        for product in products:
            if self.find(product.id) is None:
                self.lines.append(CartLine(product.snapshot(), Quantity(1)))

    def increment(self, product_id: str) -> None:
        line = self._get(product_id)
        line.quantity = Quantity(line.quantity.value + 1)

    def decrement(self, product_id: str) -> None:
        line = self._get(product_id)
        if line.quantity.value <= 1:
            self.lines.remove(line)
        else:
            line.quantity = Quantity(line.quantity.value - 1)

    def remove(self, product_id: str) -> None:
        self.lines.remove(self._get(product_id))

    def clear(self) -> None:
        self.lines = []
        self.applied_code = None

    # --- Discount code --------------------------------------------------------

    def apply_code(self, code: str) -> None:
        """Attach a manual code, replacing any previously applied one.

        Resolution against the discount registry is the pricing engine's
        job and must happen before calling this.
        """
        self.applied_code = code.strip()

    def clear_code(self) -> None:
        self.applied_code = None

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    def find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def _get(self, product_id: str) -> CartLine:
        line = self.find(product_id)
        if line is None:
            raise EntityNotFoundError(f"Product ID '{product_id}' is not in the cart")
        return line
