"""Unit tests for the pricing engine: markdowns, coupon codes and totals."""

import pytest

from storefront.domain.exceptions import InvalidCode
from storefront.domain.model.customer import CustomerType
from storefront.domain.model.order import AutomaticSavings, ManualDiscount
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing_engine import PricingEngine
from tests.builders import auto_rule, make_customer, make_line, manual_rule

REGULAR = make_customer("CUST-001", CustomerType.REGULAR)
PREMIUM = make_customer("CUST-002", CustomerType.PREMIUM)
VIP = make_customer("CUST-003", CustomerType.VIP)


@pytest.fixture
def engine() -> PricingEngine:
    return PricingEngine()


# ── Reference scenarios ──────────────────────────────────────────────────────


class TestScenarios:

    def test_no_discounts(self, engine):
        result = engine.compute_totals([make_line("P1", "100", qty=2)], [], REGULAR)
        assert result.base_subtotal == Money.of("200")
        assert result.total == Money.of("200")
        assert result.applied_discount is None

    def test_automatic_markdown(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "100")], [auto_rule("a1", "P1", 20)], REGULAR
        )
        assert result.automatic_savings == Money.of("20")
        assert result.total == Money.of("80")

    def test_vip_gets_no_markdown(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "100")], [auto_rule("a1", "P1", 20)], VIP
        )
        assert result.automatic_savings == Money.of("0")
        assert result.total == Money.of("100")

    def test_whole_cart_code(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "50", qty=4)],
            [manual_rule("m1", "SAVE10", 10)],
            REGULAR,
            "SAVE10",
        )
        assert result.base_subtotal == Money.of("200")
        assert result.manual_savings_amount == Money.of("20")
        assert result.total == Money.of("180")

    def test_unknown_code_rejected(self, engine):
        with pytest.raises(InvalidCode):
            engine.compute_totals(
                [make_line("P1", "50", qty=4)],
                [manual_rule("m1", "SAVE10", 10)],
                REGULAR,
                "NOPE",
            )


# ── Automatic markdowns ──────────────────────────────────────────────────────


class TestAutomaticSavings:

    @pytest.mark.parametrize("order", [("low", "high"), ("high", "low")])
    def test_highest_percentage_wins_regardless_of_order(self, engine, order):
        rules = {"low": auto_rule("low", "P1", 10), "high": auto_rule("high", "P1", 25)}
        registry = [rules[name] for name in order]

        result = engine.compute_totals([make_line("P1", "100")], registry, REGULAR)

        assert result.automatic_savings == Money.of("25")
        assert result.saving_for("P1").rule.id == "high"

    def test_tie_goes_to_first_in_registry(self, engine):
        registry = [auto_rule("first", "P1", 15), auto_rule("second", "P1", 15)]
        result = engine.compute_totals([make_line("P1", "100")], registry, REGULAR)
        assert result.saving_for("P1").rule.id == "first"

    def test_inactive_rule_ignored(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "100")], [auto_rule("a1", "P1", 20, active=False)], REGULAR
        )
        assert result.automatic_savings == Money.of("0")

    def test_rule_for_other_product_ignored(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "100")], [auto_rule("a1", "P2", 20)], REGULAR
        )
        assert result.automatic_savings == Money.of("0")

    def test_manual_rule_never_applies_automatically(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "100")], [manual_rule("m1", "P1DEAL", 20, product_id="P1")], REGULAR
        )
        assert result.automatic_savings == Money.of("0")
        assert result.manual_rule is None

    def test_saving_scales_with_quantity(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "100", qty=3)], [auto_rule("a1", "P1", 10)], PREMIUM
        )
        assert result.automatic_savings == Money.of("30")

    def test_savings_summed_across_lines(self, engine):
        lines = [make_line("P1", "100"), make_line("P2", "40", qty=2), make_line("P3", "10")]
        registry = [auto_rule("a1", "P1", 10), auto_rule("a2", "P2", 50)]
        result = engine.compute_totals(lines, registry, REGULAR)
        assert result.automatic_savings == Money.of("50")
        assert result.saving_for("P3").amount == Money.of("0")
        assert result.total == Money.of("140")

    def test_amounts_rounded_to_cents(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "9.99")], [auto_rule("a1", "P1", 15)], REGULAR
        )
        assert result.automatic_savings == Money.of("1.50")
        assert result.total == Money.of("8.49")

    @pytest.mark.parametrize("pct", [1, 20, 50, 99])
    @pytest.mark.parametrize("qty", [1, 2, 7])
    def test_vip_never_gets_automatic_savings(self, engine, pct, qty):
        lines = [make_line("P1", "19.99", qty=qty), make_line("P2", "5.00")]
        registry = [auto_rule("a1", "P1", pct), auto_rule("a2", "P2", pct)]
        result = engine.compute_totals(lines, registry, VIP)
        assert result.automatic_savings == Money.of("0")
        assert all(s.rule is None for s in result.line_savings)


# ── Manual codes ─────────────────────────────────────────────────────────────


class TestManualCodes:

    def test_code_match_is_case_insensitive(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "100")], [manual_rule("m1", "SAVE10", 10)], REGULAR, "  save10 "
        )
        assert result.manual_rule.id == "m1"

    def test_customer_scoped_code_accepted_for_owner(self, engine):
        registry = [manual_rule("d2", "01933333333", 30, customer_id="CUST-003")]
        result = engine.compute_totals([make_line("P1", "100")], registry, VIP, "01933333333")
        assert result.manual_savings_amount == Money.of("30")
        assert result.total == Money.of("70")

    def test_customer_scoped_code_rejected_for_others(self, engine):
        registry = [manual_rule("d2", "01933333333", 30, customer_id="CUST-003")]
        with pytest.raises(InvalidCode, match="not valid for this customer"):
            engine.compute_totals([make_line("P1", "100")], registry, REGULAR, "01933333333")

    def test_inactive_code_rejected(self, engine):
        registry = [manual_rule("m1", "SAVE10", 10, active=False)]
        with pytest.raises(InvalidCode):
            engine.compute_totals([make_line("P1", "100")], registry, REGULAR, "SAVE10")

    def test_automatic_label_cannot_be_entered(self, engine):
        registry = [auto_rule("a1", "P1", 20)]
        with pytest.raises(InvalidCode):
            engine.compute_totals([make_line("P1", "100")], registry, REGULAR, "AUTO-a1")

    def test_blank_code_rejected(self, engine):
        with pytest.raises(InvalidCode):
            engine.compute_totals([make_line("P1", "100")], [], REGULAR, "   ")

    def test_untargeted_code_applies_after_markdowns(self, engine):
        lines = [make_line("P1", "100"), make_line("P2", "50")]
        registry = [auto_rule("a1", "P1", 20), manual_rule("m1", "SAVE10", 10)]

        result = engine.compute_totals(lines, registry, REGULAR, "SAVE10")

        assert result.base_subtotal == Money.of("150")
        assert result.automatic_savings == Money.of("20")
        assert result.manual_savings_amount == Money.of("13")
        assert result.total == Money.of("117")

    def test_targeted_code_stacks_with_markdown_on_same_line(self, engine):
        registry = [auto_rule("a1", "P1", 20), manual_rule("m1", "P1EXTRA", 10, product_id="P1")]

        result = engine.compute_totals([make_line("P1", "100")], registry, REGULAR, "P1EXTRA")

        assert result.automatic_savings == Money.of("20")
        assert result.manual_savings_amount == Money.of("10")
        assert result.total_savings == Money.of("30")
        assert result.total == Money.of("70")

    def test_targeted_code_only_touches_its_line(self, engine):
        lines = [make_line("P1", "100", qty=2), make_line("P2", "300")]
        registry = [manual_rule("m1", "P1DEAL", 25, product_id="P1")]
        result = engine.compute_totals(lines, registry, REGULAR, "P1DEAL")
        assert result.manual_savings_amount == Money.of("50")
        assert result.total == Money.of("450")

    def test_targeted_code_for_product_not_in_cart_saves_nothing(self, engine):
        registry = [manual_rule("m1", "P9DEAL", 25, product_id="P9")]
        result = engine.compute_totals([make_line("P1", "100")], registry, REGULAR, "P9DEAL")
        assert result.manual_rule.id == "m1"
        assert result.manual_savings_amount == Money.of("0")
        assert result.total == Money.of("100")

    def test_first_matching_rule_is_used(self, engine):
        registry = [manual_rule("m1", "DUP", 10), manual_rule("m2", "dup", 40)]
        result = engine.compute_totals([make_line("P1", "100")], registry, REGULAR, "DUP")
        assert result.manual_rule.id == "m1"


# ── Totals ───────────────────────────────────────────────────────────────────


class TestTotals:

    def test_stacked_discounts_clamp_to_zero(self, engine):
        registry = [auto_rule("a1", "P1", 99), manual_rule("m1", "P1MAX", 99, product_id="P1")]
        result = engine.compute_totals([make_line("P1", "100")], registry, REGULAR, "P1MAX")
        assert result.total_savings == Money.of("198")
        assert result.total == Money.of("0")

    @pytest.mark.parametrize("auto_pct", [1, 50, 98, 99])
    @pytest.mark.parametrize("manual_pct", [1, 50, 99])
    def test_total_never_negative(self, engine, auto_pct, manual_pct):
        lines = [make_line("P1", "33.33", qty=3), make_line("P2", "0.01")]
        registry = [
            auto_rule("a1", "P1", auto_pct),
            auto_rule("a2", "P2", auto_pct),
            manual_rule("m1", "STACK", manual_pct, product_id="P1"),
        ]
        result = engine.compute_totals(lines, registry, REGULAR, "STACK")
        assert result.total.amount >= 0

    def test_empty_cart_totals_zero(self, engine):
        result = engine.compute_totals([], [auto_rule("a1", "P1", 20)], REGULAR)
        assert result.total == Money.of("0")
        assert result.line_savings == ()

    def test_same_inputs_same_result(self, engine):
        lines = [make_line("P1", "100", qty=2), make_line("P2", "45.50")]
        registry = [auto_rule("a1", "P1", 15), manual_rule("m1", "SAVE10", 10)]

        first = engine.compute_totals(lines, registry, REGULAR, "SAVE10")
        second = engine.compute_totals(lines, registry, REGULAR, "SAVE10")

        assert first == second

    def test_inputs_not_mutated(self, engine):
        lines = [make_line("P1", "100", qty=2)]
        registry = [auto_rule("a1", "P1", 15), manual_rule("m1", "SAVE10", 10)]

        engine.compute_totals(lines, registry, REGULAR, "SAVE10")

        assert lines[0].quantity.value == 2
        assert lines[0].unit_price == Money.of("100")
        assert [r.id for r in registry] == ["a1", "m1"]
        assert all(r.is_active for r in registry)


class TestAppliedDiscount:

    def test_manual_rule_recorded(self, engine):
        registry = [auto_rule("a1", "P1", 20), manual_rule("m1", "SAVE10", 10)]
        result = engine.compute_totals([make_line("P1", "100")], registry, REGULAR, "SAVE10")

        applied = result.applied_discount
        assert isinstance(applied, ManualDiscount)
        assert applied.code == "SAVE10"
        assert applied.amount == Money.of("8")

    def test_automatic_aggregate_recorded_without_code(self, engine):
        result = engine.compute_totals(
            [make_line("P1", "100")], [auto_rule("a1", "P1", 20)], REGULAR
        )
        assert result.applied_discount == AutomaticSavings(amount=Money.of("20"))


class TestBestAutomaticRule:

    def test_returns_none_for_vip(self, engine):
        assert engine.best_automatic_rule("P1", [auto_rule("a1", "P1", 20)], VIP) is None

    def test_returns_best_rule(self, engine):
        registry = [auto_rule("a1", "P1", 20), auto_rule("a2", "P1", 30)]
        assert engine.best_automatic_rule("P1", registry, REGULAR).id == "a2"
