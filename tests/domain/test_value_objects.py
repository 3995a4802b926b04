"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, validate_percentage


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        assert Money.of(1299.99).amount == Decimal("1299.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_minus_clamped_floors_at_zero(self):
        assert Money.of("5").minus_clamped(Money.of("10")) == Money.of("0")
        assert Money.of("10").minus_clamped(Money.of("4")) == Money.of("6")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_percentage(self):
        assert Money.of("200").percentage(10) == Money.of("20.00")

    def test_percentage_rounds_half_up_to_cents(self):
        assert Money.of("0.05").percentage(50) == Money.of("0.03")
        assert Money.of("9.99").percentage(15) == Money.of("1.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero

    def test_no_ordering_between_amounts(self):
        with pytest.raises(TypeError):
            Money.of("1") < Money.of("2")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


# ── Percentage ───────────────────────────────────────────────────────────────


class TestPercentage:

    @pytest.mark.parametrize("pct", [1, 50, 99])
    def test_bounds_accepted(self, pct):
        assert validate_percentage(pct) == pct

    @pytest.mark.parametrize("pct", [0, 100, -5])
    def test_out_of_range_rejected(self, pct):
        with pytest.raises(ValidationError, match="between 1 and 99"):
            validate_percentage(pct)

    def test_fraction_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_percentage(12.5)
