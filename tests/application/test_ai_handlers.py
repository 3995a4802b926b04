"""Tests for the AI-assisted use cases, using a fake text generator."""

import json

import pytest

from storefront.application.analyze_sales import AnalyzeSalesHandler
from storefront.application.generate_product_description import (
    GenerateProductDescriptionHandler,
)
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository, FakeTextGenerator


class TestDescribeProduct:

    def test_returns_generated_text(self):
        generator = FakeTextGenerator(reply="  A camera for every moment.  ")
        text = GenerateProductDescriptionHandler(generator).handle(
            "Quantum Lens Camera", "Electronics", "Lumina Optics"
        )
        assert text == "A camera for every moment."

        prompt, temperature = generator.prompts[0]
        assert '"Quantum Lens Camera" by "Lumina Optics"' in prompt
        assert temperature == 0.7

    def test_empty_reply(self):
        handler = GenerateProductDescriptionHandler(FakeTextGenerator(reply=""))
        assert handler.handle("Cam", "Electronics", "Lumina") == "No description generated."

    def test_service_failure_returns_message(self):
        handler = GenerateProductDescriptionHandler(FakeTextGenerator(error="HTTP 503"))
        assert handler.handle("Cam", "Electronics", "Lumina") == (
            "Failed to generate description. Please try again."
        )

    def test_missing_fields_rejected_before_calling(self):
        generator = FakeTextGenerator(reply="x")
        with pytest.raises(ValidationError, match="name, brand, and category"):
            GenerateProductDescriptionHandler(generator).handle("Cam", "", "Lumina")
        assert generator.prompts == []


class TestAnalyzeSales:

    def _repo(self):
        order = Order(
            id="123456",
            customer_id="CUST-001",
            customer_name="Rahim Ahmed",
            shipping_address="12 Lake Road",
            items=[
                OrderLineItem("1", "CAM-Q-101", "Quantum Lens Camera", "Lumina", Quantity(2), Money.of("10"))
            ],
            subtotal=Money.of("20"),
            total=Money.of("20"),
        )
        return FakeOrderRepository([order])

    def test_sends_order_summary(self):
        generator = FakeTextGenerator(reply="Sales are up. Bundle cameras with lenses.")
        text = AnalyzeSalesHandler(self._repo(), generator).handle()
        assert text == "Sales are up. Bundle cameras with lenses."

        prompt, temperature = generator.prompts[0]
        assert temperature == 0.5
        payload = json.loads(prompt[prompt.index("["):])
        assert payload[0]["id"] == "123456"
        assert payload[0]["total"] == "20"
        assert payload[0]["items"] == [{"name": "Quantum Lens Camera", "quantity": 2}]

    def test_empty_reply(self):
        handler = AnalyzeSalesHandler(self._repo(), FakeTextGenerator(reply=" "))
        assert handler.handle() == "No analysis available."

    def test_service_failure(self):
        handler = AnalyzeSalesHandler(self._repo(), FakeTextGenerator(error="timeout"))
        assert handler.handle() == "Sales analysis currently unavailable."
