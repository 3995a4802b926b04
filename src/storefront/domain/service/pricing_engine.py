"""Domain service: Pricing Engine.

Turns a cart, the discount registry and the shopper into a payable total.
The rules, in order:

  1. Automatic markdowns, per line.  VIP customers get none.  Otherwise
     the highest-percentage active automatic rule targeting the line's
     product wins (first in registry order on ties).
  2. At most one manual code.  A product-targeted manual rule discounts
     that line's full subtotal and stacks with its markdown; an
     untargeted one discounts the subtotal left after markdowns.
  3. ``total = base_subtotal - automatic - manual``, floored at zero.

The engine is a pure function of its inputs.  It never mutates the cart
or the registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from storefront.domain.exceptions import InvalidCode
from storefront.domain.model.cart import CartLine
from storefront.domain.model.customer import Customer
from storefront.domain.model.discount import DiscountRule
from storefront.domain.model.order import AppliedDiscount, AutomaticSavings, ManualDiscount
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class LineSaving:
    product_id: str
    rule: DiscountRule | None
    amount: Money


@dataclass(frozen=True)
class PricingResult:
    base_subtotal: Money
    line_savings: tuple[LineSaving, ...]
    automatic_savings: Money
    manual_savings_amount: Money
    manual_rule: DiscountRule | None
    total: Money

    @property
    def total_savings(self) -> Money:
        return self.automatic_savings + self.manual_savings_amount

    @property
    def applied_discount(self) -> AppliedDiscount | None:
        """The single discount record an order made from this result carries."""
        if self.manual_rule is not None:
            return ManualDiscount(
                rule_id=self.manual_rule.id,
                code=self.manual_rule.code,
                percentage=self.manual_rule.percentage,
                description=self.manual_rule.description,
                amount=self.manual_savings_amount,
            )
        if not self.automatic_savings.is_zero:
            return AutomaticSavings(amount=self.automatic_savings)
        return None

    def saving_for(self, product_id: str) -> LineSaving | None:
        for saving in self.line_savings:
            if saving.product_id == product_id:
                return saving
        return None


class PricingEngine:

    def compute_totals(
        self,
        lines: Sequence[CartLine],
        discounts: Sequence[DiscountRule],
        customer: Customer,
        manual_code: str | None = None,
    ) -> PricingResult:
        """Price *lines* for *customer*, optionally with one manual code.

        Raises InvalidCode if *manual_code* is given but does not resolve
        to an active manual rule this customer may redeem.
        """
        base_subtotal = _sum(line.line_subtotal for line in lines)

        line_savings = tuple(
            self._automatic_saving(line, discounts, customer) for line in lines
        )
        automatic_savings = _sum(saving.amount for saving in line_savings)

        manual_rule: DiscountRule | None = None
        manual_amount = Money.zero()
        if manual_code is not None:
            manual_rule = self.resolve_code(manual_code, discounts, customer)
            manual_amount = self._manual_amount(
                manual_rule, lines, base_subtotal, automatic_savings
            )

        total = base_subtotal.minus_clamped(automatic_savings + manual_amount)

        return PricingResult(
            base_subtotal=base_subtotal,
            line_savings=line_savings,
            automatic_savings=automatic_savings,
            manual_savings_amount=manual_amount,
            manual_rule=manual_rule,
            total=total,
        )

    def resolve_code(
        self,
        code: str,
        discounts: Sequence[DiscountRule],
        customer: Customer,
    ) -> DiscountRule:
        """Find the active manual rule for *code* that *customer* may use."""
        if not code or not code.strip():
            raise InvalidCode("Please enter a discount code")

        for rule in discounts:
            if rule.matches_code(code):
                if not rule.is_redeemable_by(customer):
                    raise InvalidCode(
                        f"Code '{code.strip()}' is not valid for this customer"
                    )
                return rule
        raise InvalidCode(f"Invalid discount code '{code.strip()}'")

    def best_automatic_rule(
        self,
        product_id: str,
        discounts: Iterable[DiscountRule],
        customer: Customer,
    ) -> DiscountRule | None:
        """Highest-percentage markdown for a product; none for VIPs."""
        if customer.is_vip:
            return None
        best: DiscountRule | None = None
        for rule in discounts:
            if not rule.applies_automatically_to(product_id):
                continue
            # strict comparison keeps the first rule on ties
            if best is None or rule.percentage > best.percentage:
                best = rule
        return best

    # --- Internal helpers -----------------------------------------------------

    def _automatic_saving(
        self,
        line: CartLine,
        discounts: Sequence[DiscountRule],
        customer: Customer,
    ) -> LineSaving:
        rule = self.best_automatic_rule(line.product_id, discounts, customer)
        if rule is None:
            return LineSaving(line.product_id, None, Money.zero())
        return LineSaving(
            line.product_id, rule, line.line_subtotal.percentage(rule.percentage)
        )

    @staticmethod
    def _manual_amount(
        rule: DiscountRule,
        lines: Sequence[CartLine],
        base_subtotal: Money,
        automatic_savings: Money,
    ) -> Money:
        if rule.is_product_targeted:
            for line in lines:
                if line.product_id == rule.target_product_id:
                    return line.line_subtotal.percentage(rule.percentage)
            return Money.zero()
        after_automatic = base_subtotal.minus_clamped(automatic_savings)
        return after_automatic.percentage(rule.percentage)


def _sum(amounts: Iterable[Money]) -> Money:
    result = Money.zero()
    for amount in amounts:
        result = result + amount
    return result
