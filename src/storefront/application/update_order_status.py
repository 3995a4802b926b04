"""Application service: administrator-triggered order status change.

The Order aggregate enforces the state machine; this handler only maps
the requested action onto it and persists the result.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

# "confirm" is what the back office calls PENDING -> PROCESSING
ACTIONS: dict[str, OrderStatus] = {
    "confirm": OrderStatus.PROCESSING,
    "process": OrderStatus.PROCESSING,
    "ship": OrderStatus.SHIPPED,
    "deliver": OrderStatus.DELIVERED,
    "cancel": OrderStatus.CANCELLED,
}


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, action: str) -> OrderDTO:
        target = ACTIONS.get(action.lower())
        if target is None:
            raise ValidationError(
                f"Unknown action '{action}'. Expected one of: {', '.join(ACTIONS)}"
            )

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.transition_to(target)
        self._order_repo.save(order)

        logger.info(
            "Order #%s moved %s -> %s", order_id, previous.value, order.status.value
        )
        return to_order_dto(order)
