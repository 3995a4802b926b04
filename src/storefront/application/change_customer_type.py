"""Application service: change a customer's tier (REGULAR / PREMIUM / VIP)."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.customer import Customer, CustomerType
from storefront.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class ChangeCustomerTypeHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, new_type: str) -> Customer:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        try:
            customer_type = CustomerType(new_type.upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown customer type '{new_type}'") from exc

        customer.change_type(customer_type)
        self._customer_repo.save(customer)
        logger.info("Customer %s is now %s", customer_id, customer_type.value)
        return customer
