"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        name: str | None = None,
        brand: str | None = None,
        category: str | None = None,
        description: str | None = None,
        stock: int | None = None,
    ) -> Product:
        """Update a product's price and/or details.

        This does NOT affect any existing orders; they captured a
        price snapshot at checkout time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if new_price is not None:
            product.update_price(Money.of(new_price))
        product.update_details(
            name=name,
            brand=brand,
            category=category,
            description=description,
            stock=stock,
        )
        self._product_repo.save(product)
        logger.info("Updated product %s", product_id)
        return product
