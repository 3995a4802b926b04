"""Application service: Remove Customer use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class RemoveCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> None:
        if self._customer_repo.get_by_id(customer_id) is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")
        self._customer_repo.delete(customer_id)
        logger.info("Removed customer %s", customer_id)
