"""DiscountRule aggregate: automatic markdowns and manual coupon codes.

Automatic rules are found by scanning for a matching target product and
never by code; their ``code`` is only a display label.  Manual rules are
found only by code, and a customer-scoped manual rule is redeemable by
that one customer.
"""

from __future__ import annotations

import random
import string
from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import validate_percentage


def automatic_label() -> str:
    """Display label for a new automatic rule, e.g. ``AUTO-7QX2``."""
    suffix = "".join(random.choices(string.ascii_uppercase + string.digits, k=4))
    return f"AUTO-{suffix}"


@dataclass
class DiscountRule:

    id: str
    code: str
    percentage: int
    is_active: bool = True
    is_automatic: bool = False
    target_product_id: str | None = None
    target_customer_id: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        validate_percentage(self.percentage)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def automatic(
        id: str,
        target_product_id: str,
        percentage: int,
        description: str,
        label: str | None = None,
    ) -> DiscountRule:
        """Markdown applied to one product without any code entry."""
        if not target_product_id:
            raise ValidationError("Automatic discounts must target a product")
        return DiscountRule(
            id=id,
            code=label or automatic_label(),
            percentage=percentage,
            is_active=True,
            is_automatic=True,
            target_product_id=target_product_id,
            description=description,
        )

    @staticmethod
    def manual(
        id: str,
        code: str,
        percentage: int,
        description: str,
        target_product_id: str | None = None,
        target_customer_id: str | None = None,
    ) -> DiscountRule:
        """Coupon that must be entered at checkout."""
        if not code or not code.strip():
            raise ValidationError("Manual discounts require a code")
        return DiscountRule(
            id=id,
            code=code.strip().upper(),
            percentage=percentage,
            is_active=True,
            is_automatic=False,
            target_product_id=target_product_id or None,
            target_customer_id=target_customer_id or None,
            description=description,
        )

    # --- Queries --------------------------------------------------------------

    @property
    def is_product_targeted(self) -> bool:
        return self.target_product_id is not None

    def applies_automatically_to(self, product_id: str) -> bool:
        return (
            self.is_active
            and self.is_automatic
            and self.target_product_id == product_id
        )

    def matches_code(self, code: str) -> bool:
        """Case-insensitive code match; only active manual rules can match."""
        if not self.is_active or self.is_automatic:
            return False
        return self.code.strip().casefold() == code.strip().casefold()

    def is_redeemable_by(self, customer: Customer) -> bool:
        return self.target_customer_id is None or self.target_customer_id == customer.id

    # --- Mutations ------------------------------------------------------------

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False
