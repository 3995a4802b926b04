"""Application service: Search Customers use case (query)."""

from __future__ import annotations

from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository


class SearchCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, term: str | None = None) -> list[Customer]:
        customers = self._customer_repo.list_all()
        if not term:
            return customers
        return [c for c in customers if c.matches(term)]
