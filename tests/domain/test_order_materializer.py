"""Unit tests for turning a priced cart into an Order."""

import pytest

from storefront.domain.exceptions import EmptyCart, MissingShippingAddress
from storefront.domain.model.cart import Cart
from storefront.domain.model.customer import CustomerType
from storefront.domain.model.order import AutomaticSavings, ManualDiscount, OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_materializer import OrderMaterializer, random_order_id
from storefront.domain.service.pricing_engine import PricingEngine
from tests.builders import auto_rule, make_customer, make_product, manual_rule

CUSTOMER = make_customer("CUST-001", CustomerType.REGULAR, name="Rahim Ahmed")


def _cart(*product_ids: str) -> Cart:
    cart = Cart(CUSTOMER.id)
    for pid in product_ids:
        cart.add(make_product(pid, "100"))
    return cart


def _materialize(cart, registry=(), code=None, address="12 Lake Road"):
    pricing = PricingEngine().compute_totals(cart.lines, list(registry), CUSTOMER, code)
    materializer = OrderMaterializer(id_generator=lambda: "654321")
    return materializer.materialize(cart.lines, pricing, CUSTOMER, address)


class TestMaterialize:

    def test_creates_pending_order(self):
        order = _materialize(_cart("P1", "P1"))
        assert order.id == "654321"
        assert order.status == OrderStatus.PENDING
        assert order.customer_id == "CUST-001"
        assert order.customer_name == "Rahim Ahmed"
        assert order.shipping_address == "12 Lake Road"
        assert order.subtotal == Money.of("200")
        assert order.total == Money.of("200")
        assert order.applied_discount is None

    def test_manual_discount_recorded(self):
        order = _materialize(_cart("P1"), [manual_rule("m1", "SAVE10", 10)], "SAVE10")
        assert isinstance(order.applied_discount, ManualDiscount)
        assert order.applied_discount.rule_id == "m1"
        assert order.total == Money.of("90")

    def test_automatic_savings_recorded_without_code(self):
        order = _materialize(_cart("P1"), [auto_rule("a1", "P1", 20)])
        assert order.applied_discount == AutomaticSavings(amount=Money.of("20"))
        assert order.total == Money.of("80")

    def test_items_are_snapshots(self):
        cart = _cart("P1")
        order = _materialize(cart)

        cart.increment("P1")
        cart.lines[0].product.update_price(Money.of("5"))

        assert order.items[0].quantity.value == 1
        assert order.items[0].unit_price == Money.of("100")

    def test_cart_left_untouched(self):
        cart = _cart("P1")
        _materialize(cart)
        assert cart.item_count == 1

    def test_address_trimmed(self):
        assert _materialize(_cart("P1"), address="  5 Hill St \n").shipping_address == "5 Hill St"


class TestRejections:

    def test_empty_cart(self):
        with pytest.raises(EmptyCart):
            _materialize(_cart())

    @pytest.mark.parametrize("address", ["", "   "])
    def test_missing_address(self, address):
        with pytest.raises(MissingShippingAddress):
            _materialize(_cart("P1"), address=address)


def test_random_order_id_is_six_digits():
    for _ in range(50):
        order_id = random_order_id()
        assert len(order_id) == 6
        assert order_id.isdigit()
        assert not order_id.startswith("0")
