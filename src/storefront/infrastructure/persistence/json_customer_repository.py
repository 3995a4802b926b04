"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.customer import Customer, CustomerType
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file = JsonFile(file_path, seed)

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._file.load():
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, customer: Customer) -> None:
        customers = self._file.load()
        for i, raw in enumerate(customers):
            if raw["id"] == customer.id:
                customers[i] = self._to_raw(customer)
                break
        else:
            customers.append(self._to_raw(customer))
        self._file.persist(customers)

    def delete(self, customer_id: str) -> None:
        self._file.persist([c for c in self._file.load() if c["id"] != customer_id])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "email": customer.email,
            "phone": customer.phone,
            "type": customer.type.value,
            "joined_at": customer.joined_at.isoformat() if customer.joined_at else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        joined_at = raw.get("joined_at")
        return Customer(
            id=raw["id"],
            name=raw["name"],
            email=raw.get("email", ""),
            phone=raw.get("phone", ""),
            type=CustomerType(raw.get("type", "REGULAR")),
            joined_at=datetime.fromisoformat(joined_at) if joined_at else None,
        )
