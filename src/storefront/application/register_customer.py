"""Application service: Register Customer use case.

New customers always start as REGULAR with an id of the form
``CUST-NNNN``.
"""

from __future__ import annotations

import logging
import random

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 20


def random_customer_id() -> str:
    return f"CUST-{random.randint(1000, 9999)}"


class RegisterCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        id_generator=random_customer_id,
    ) -> None:
        self._customer_repo = customer_repo
        self._id_generator = id_generator

    def handle(self, name: str, email: str, phone: str) -> Customer:
        customer = Customer.register(
            id=self._unused_id(), name=name, email=email, phone=phone
        )
        self._customer_repo.save(customer)
        logger.info("Registered customer %s", customer.id)
        return customer

    def _unused_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_generator()
            if self._customer_repo.get_by_id(candidate) is None:
                return candidate
        raise ValidationError("Could not allocate a free customer ID")
