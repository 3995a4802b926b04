"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

DEFAULT_IMAGE = "https://picsum.photos/seed/new/400/400"


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. Only ``id`` and ``price`` matter to
    pricing; the rest is display metadata that gets copied into carts
    and order snapshots.
    """

    id: str
    code: str
    name: str
    price: Money
    brand: str = ""
    category: str = ""
    description: str = ""
    stock: int = 0
    image: str = DEFAULT_IMAGE

    @staticmethod
    def create(
        id: str,
        code: str,
        name: str,
        price: Money,
        brand: str,
        category: str = "",
        description: str = "",
        stock: int = 0,
        image: str | None = None,
    ) -> Product:
        """Create a new catalog entry, enforcing the required fields."""
        for label, value in (("name", name), ("code", code), ("brand", brand)):
            if not value or not value.strip():
                raise ValidationError(f"Product {label} is required")
        if price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        if stock < 0:
            raise ValidationError("Stock cannot be negative")
        return Product(
            id=id,
            code=code.strip(),
            name=name.strip(),
            price=price,
            brand=brand.strip(),
            category=category.strip(),
            description=description,
            stock=stock,
            image=image or DEFAULT_IMAGE,
        )

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at checkout time.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def update_details(
        self,
        name: str | None = None,
        brand: str | None = None,
        category: str | None = None,
        description: str | None = None,
        stock: int | None = None,
    ) -> None:
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            self.name = name.strip()
        if brand is not None:
            if not brand.strip():
                raise ValidationError("Product brand is required")
            self.brand = brand.strip()
        if category is not None:
            self.category = category.strip()
        if description is not None:
            self.description = description
        if stock is not None:
            if stock < 0:
                raise ValidationError("Stock cannot be negative")
            self.stock = stock

    def snapshot(self) -> Product:
        """Detached copy for carts; later catalog edits do not leak in."""
        return replace(self)
