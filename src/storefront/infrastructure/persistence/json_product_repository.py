"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import DEFAULT_IMAGE, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file = JsonFile(file_path, seed)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_code(self, code: str) -> Product | None:
        for product in self._load().values():
            if product.code.lower() == code.strip().lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def delete(self, product_id: str) -> None:
        products = self._load()
        products.pop(product_id, None)
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {item["id"]: product_from_raw(item) for item in self._file.load()}

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist([product_to_raw(p) for p in products.values()])


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "code": product.code,
        "name": product.name,
        "brand": product.brand,
        "category": product.category,
        "description": product.description,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "stock": product.stock,
        "image": product.image,
    }


def product_from_raw(raw: dict) -> Product:
    return Product(
        id=raw["id"],
        code=raw.get("code", ""),
        name=raw["name"],
        price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
        brand=raw.get("brand", ""),
        category=raw.get("category", ""),
        description=raw.get("description", ""),
        stock=raw.get("stock", 0),
        image=raw.get("image") or DEFAULT_IMAGE,
    )
