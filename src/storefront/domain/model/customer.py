"""Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError


class CustomerType(Enum):
    REGULAR = "REGULAR"
    PREMIUM = "PREMIUM"
    VIP = "VIP"


@dataclass
class Customer:
    """A shopper known to the store.

    VIP customers never receive automatic product markdowns; that rule
    lives in the pricing engine, this class only exposes ``is_vip``.
    """

    id: str
    name: str
    email: str = ""
    phone: str = ""
    type: CustomerType = CustomerType.REGULAR
    joined_at: datetime | None = None

    @staticmethod
    def register(id: str, name: str, email: str, phone: str) -> Customer:
        """Create a new REGULAR customer, enforcing the required fields."""
        for label, value in (("name", name), ("email", email), ("phone", phone)):
            if not value or not value.strip():
                raise ValidationError(f"Customer {label} is required")
        return Customer(
            id=id,
            name=name.strip(),
            email=email.strip(),
            phone=phone.strip(),
            type=CustomerType.REGULAR,
            joined_at=datetime.now(timezone.utc),
        )

    @property
    def is_vip(self) -> bool:
        return self.type == CustomerType.VIP

    def change_type(self, new_type: CustomerType) -> None:
        self.type = new_type

    def matches(self, term: str) -> bool:
        """Search match on name and email (case-insensitive) or phone."""
        lowered = term.lower()
        return (
            lowered in self.name.lower()
            or lowered in self.email.lower()
            or term in self.phone
        )
