"""Application service: AI summary of sales trends.

Sends a compact JSON view of the order history and returns the model's
summary plus one suggested action.  Never raises on service failure.
"""

from __future__ import annotations

import json
import logging

from storefront.application.text_generation import TextGenerationError, TextGenerator
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

TEMPERATURE = 0.5
EMPTY_RESPONSE = "No analysis available."
FAILURE_MESSAGE = "Sales analysis currently unavailable."


class AnalyzeSalesHandler:

    def __init__(self, order_repo: OrderRepository, generator: TextGenerator) -> None:
        self._order_repo = order_repo
        self._generator = generator

    def handle(self) -> str:
        order_data = [_summarize(o) for o in self._order_repo.list_all()]
        prompt = (
            "As a business analyst, briefly summarize these sales trends and "
            "suggest one action to improve revenue: "
            + json.dumps(order_data)
        )
        try:
            text = self._generator.generate(prompt, temperature=TEMPERATURE)
        except TextGenerationError as exc:
            logger.warning("AI sales analysis failed: %s", exc)
            return FAILURE_MESSAGE
        return text.strip() or EMPTY_RESPONSE


def _summarize(order: Order) -> dict:
    return {
        "id": order.id,
        "customer": order.customer_name,
        "status": order.status.value,
        "total": str(order.total.amount),
        "createdAt": order.created_at.isoformat(),
        "items": [
            {"name": item.product_name, "quantity": item.quantity.value}
            for item in order.items
        ],
    }
