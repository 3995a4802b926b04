"""Application service: back-office dashboard figures (query)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from storefront.application.dto import DashboardDTO, to_order_dto
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import CENT, Money
from storefront.domain.repository.order_repository import OrderRepository

PENDING_PREVIEW = 5


class DashboardHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> DashboardDTO:
        orders = self._order_repo.list_all()

        revenue = Money.zero()
        for order in orders:
            revenue = revenue + order.total

        average = Money.zero()
        if orders:
            average = Money(
                (revenue.amount / Decimal(len(orders))).quantize(CENT, rounding=ROUND_HALF_UP)
            )

        pending = sorted(
            (o for o in orders if o.status == OrderStatus.PENDING),
            key=lambda o: o.created_at,
        )

        return DashboardDTO(
            total_revenue=str(revenue),
            total_orders=len(orders),
            average_order_value=str(average),
            pending_count=len(pending),
            pending_orders=[to_order_dto(o) for o in pending[:PENDING_PREVIEW]],
        )
