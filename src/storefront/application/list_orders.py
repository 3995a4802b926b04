"""Application service: List Orders use case (query).

Administrators see every order; a customer sees only their own.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        customer_id: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> list[OrderDTO]:
        orders = self._order_repo.list_all()

        if customer_id is not None:
            orders = [o for o in orders if o.customer_id == customer_id]

        if status:
            try:
                wanted = OrderStatus(status.upper())
            except ValueError as exc:
                raise ValidationError(f"Unknown order status '{status}'") from exc
            orders = [o for o in orders if o.status == wanted]

        if search:
            orders = [o for o in orders if o.matches(search)]

        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [to_order_dto(o) for o in orders]
