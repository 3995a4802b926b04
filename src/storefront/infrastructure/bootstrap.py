"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from storefront.infrastructure.ai.gemini_client import GeminiTextGenerator
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from storefront.infrastructure.persistence.json_discount_repository import (
    JsonDiscountRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.seed import SEED_CUSTOMERS, SEED_DISCOUNTS, SEED_PRODUCTS


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json", SEED_PRODUCTS)


def discount_repository() -> JsonDiscountRepository:
    return JsonDiscountRepository(settings().data_dir / "discounts.json", SEED_DISCOUNTS)


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(settings().data_dir / "customers.json", SEED_CUSTOMERS)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "carts.json")


def text_generator() -> GeminiTextGenerator:
    cfg = settings()
    return GeminiTextGenerator(
        api_key=cfg.gemini_api_key,
        model=cfg.gemini_model,
        timeout=cfg.ai_timeout,
    )
