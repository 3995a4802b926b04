"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        code: str,
        brand: str,
        price: str,
        category: str = "",
        description: str = "",
        stock: int = 0,
        image: str | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if code and self._product_repo.get_by_code(code) is not None:
            raise ValidationError(f"Product code '{code}' already exists")

        # Auto-assign ID based on existing numeric IDs
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product.create(
            id=next_id,
            code=code,
            name=name,
            price=Money.of(price),
            brand=brand,
            category=category,
            description=description,
            stock=stock,
            image=image,
        )
        self._product_repo.save(product)
        logger.info("Added product %s (%s) at %s", product.id, product.code, product.price)
        return product
