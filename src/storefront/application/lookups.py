"""Shared repository lookups that raise EntityNotFoundError on a miss."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.customer import Customer
from storefront.domain.model.product import Product
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.product_repository import ProductRepository


def require_customer(repo: CustomerRepository, customer_id: str) -> Customer:
    customer = repo.get_by_id(customer_id)
    if customer is None:
        raise EntityNotFoundError(f"Customer '{customer_id}' not found")
    return customer


def require_product(repo: ProductRepository, product_id: str) -> Product:
    product = repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product
