"""Integration tests for the order back-office use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from storefront.application.dashboard import DashboardHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.render_receipt import RenderReceiptHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidStatusTransition,
    ValidationError,
)
from storefront.domain.model.order import (
    AutomaticSavings,
    ManualDiscount,
    Order,
    OrderLineItem,
    OrderStatus,
)
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository

T0 = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)


def _order(
    order_id: str,
    total: str = "100.00",
    status: OrderStatus = OrderStatus.PENDING,
    customer_id: str = "CUST-001",
    minutes: int = 0,
    discount=None,
    subtotal: str | None = None,
) -> Order:
    return Order(
        id=order_id,
        customer_id=customer_id,
        customer_name="Rahim Ahmed" if customer_id == "CUST-001" else "Karim Ullah",
        shipping_address="12 Lake Road",
        items=[
            OrderLineItem(
                product_id="1",
                product_code="CAM-Q-101",
                product_name="Quantum Lens Camera",
                brand="Lumina Optics",
                quantity=Quantity(1),
                unit_price=Money.of(subtotal or total),
            )
        ],
        subtotal=Money.of(subtotal or total),
        total=Money.of(total),
        applied_discount=discount,
        status=status,
        created_at=T0 + timedelta(minutes=minutes),
    )


class TestShowAndList:

    def test_show(self):
        repo = FakeOrderRepository([_order("100001")])
        dto = ShowOrderHandler(repo).handle("100001")
        assert dto.total == "$100.00"
        assert dto.created_at == "2025-03-01 10:00 UTC"

    def test_show_unknown(self):
        with pytest.raises(EntityNotFoundError, match="#404404"):
            ShowOrderHandler(FakeOrderRepository()).handle("404404")

    def test_list_newest_first(self):
        repo = FakeOrderRepository([_order("100001", minutes=0), _order("100002", minutes=5)])
        assert [o.id for o in ListOrdersHandler(repo).handle()] == ["100002", "100001"]

    def test_customer_sees_only_own_orders(self):
        repo = FakeOrderRepository([
            _order("100001"),
            _order("100002", customer_id="CUST-002", minutes=1),
        ])
        dtos = ListOrdersHandler(repo).handle(customer_id="CUST-002")
        assert [o.id for o in dtos] == ["100002"]

    def test_status_filter(self):
        repo = FakeOrderRepository([
            _order("100001"),
            _order("100002", status=OrderStatus.SHIPPED, minutes=1),
        ])
        assert [o.id for o in ListOrdersHandler(repo).handle(status="shipped")] == ["100002"]

    def test_unknown_status_filter(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            ListOrdersHandler(FakeOrderRepository()).handle(status="lost")

    def test_search(self):
        repo = FakeOrderRepository([
            _order("100001"),
            _order("100002", customer_id="CUST-002", minutes=1),
        ])
        assert [o.id for o in ListOrdersHandler(repo).handle(search="karim")] == ["100002"]


class TestUpdateStatus:

    def test_confirm_moves_to_processing(self):
        repo = FakeOrderRepository([_order("100001")])
        dto = UpdateOrderStatusHandler(repo).handle("100001", "confirm")
        assert dto.status == "PROCESSING"
        assert repo.get_by_id("100001").status == OrderStatus.PROCESSING

    def test_walks_to_delivered(self):
        repo = FakeOrderRepository([_order("100001")])
        handler = UpdateOrderStatusHandler(repo)
        for action in ("process", "ship", "deliver"):
            handler.handle("100001", action)
        assert repo.get_by_id("100001").status == OrderStatus.DELIVERED

    def test_illegal_transition(self):
        repo = FakeOrderRepository([_order("100001", status=OrderStatus.SHIPPED)])
        with pytest.raises(InvalidStatusTransition):
            UpdateOrderStatusHandler(repo).handle("100001", "cancel")
        assert repo.get_by_id("100001").status == OrderStatus.SHIPPED

    def test_unknown_action(self):
        repo = FakeOrderRepository([_order("100001")])
        with pytest.raises(ValidationError, match="Unknown action"):
            UpdateOrderStatusHandler(repo).handle("100001", "refund")

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError):
            UpdateOrderStatusHandler(FakeOrderRepository()).handle("100001", "ship")


class TestReceipt:

    def test_receipt_with_manual_discount(self):
        discount = ManualDiscount("d1", "WELCOME10", 10, "10% off", Money.of("20.00"))
        repo = FakeOrderRepository([_order("100001", "180.00", discount=discount, subtotal="200.00")])
        text = RenderReceiptHandler(repo).handle("100001")

        assert text.startswith("Order Confirmation #100001 - Nova Hub")
        assert "- Quantum Lens Camera (1x) : $200.00" in text
        assert "Discount (WELCOME10 (10%)): -$20.00" in text
        assert "Total Amount: $180.00" in text
        assert "Payment: Cash on Delivery" in text

    def test_receipt_with_automatic_savings(self):
        discount = AutomaticSavings(amount=Money.of("5.00"))
        repo = FakeOrderRepository([_order("100001", "95.00", discount=discount, subtotal="100.00")])
        text = RenderReceiptHandler(repo).handle("100001")
        assert "Discount (Automatic markdowns): -$5.00" in text

    def test_receipt_without_discount(self):
        repo = FakeOrderRepository([_order("100001")])
        assert "Discount" not in RenderReceiptHandler(repo).handle("100001")


class TestDashboard:

    def test_figures(self):
        repo = FakeOrderRepository([
            _order("100001", "100.00", minutes=2),
            _order("100002", "50.00", status=OrderStatus.DELIVERED, minutes=1),
            _order("100003", "25.00", minutes=0),
        ])
        dto = DashboardHandler(repo).handle()
        assert dto.total_revenue == "$175.00"
        assert dto.total_orders == 3
        assert dto.average_order_value == "$58.33"
        assert dto.pending_count == 2
        assert [o.id for o in dto.pending_orders] == ["100003", "100001"]

    def test_pending_preview_capped_at_five(self):
        repo = FakeOrderRepository([_order(f"10000{i}", minutes=i) for i in range(7)])
        dto = DashboardHandler(repo).handle()
        assert dto.pending_count == 7
        assert len(dto.pending_orders) == 5

    def test_no_orders(self):
        dto = DashboardHandler(FakeOrderRepository()).handle()
        assert dto.total_revenue == "$0.00"
        assert dto.average_order_value == "$0.00"
