"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import (
    DEFAULT_PAYMENT_METHOD,
    AppliedDiscount,
    AutomaticSavings,
    ManualDiscount,
    Order,
    OrderLineItem,
    OrderStatus,
)
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._file.load()]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders

    def save(self, order: Order) -> None:
        orders = self._file.load()

        # Upsert: replace if exists, otherwise prepend (newest first)
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.insert(0, self._to_raw(order))

        self._file.persist(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "customer_name": order.customer_name,
            "shipping_address": order.shipping_address,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat() if order.updated_at else None,
            "payment_method": order.payment_method,
            "currency": order.total.currency,
            "subtotal": str(order.subtotal.amount),
            "total": str(order.total.amount),
            "applied_discount": _discount_to_raw(order.applied_discount),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_code": item.product_code,
                    "product_name": item.product_name,
                    "brand": item.brand,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_code=i.get("product_code", ""),
                product_name=i["product_name"],
                brand=i.get("brand", ""),
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
            )
            for i in raw["items"]
        ]
        updated_at = raw.get("updated_at")
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            customer_name=raw["customer_name"],
            shipping_address=raw["shipping_address"],
            items=items,
            subtotal=Money(Decimal(raw["subtotal"]), currency),
            total=Money(Decimal(raw["total"]), currency),
            applied_discount=_discount_from_raw(raw.get("applied_discount"), currency),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
            payment_method=raw.get("payment_method", DEFAULT_PAYMENT_METHOD),
        )


def _discount_to_raw(discount: AppliedDiscount | None) -> dict | None:
    if discount is None:
        return None
    if isinstance(discount, ManualDiscount):
        return {
            "kind": "manual",
            "rule_id": discount.rule_id,
            "code": discount.code,
            "percentage": discount.percentage,
            "description": discount.description,
            "amount": str(discount.amount.amount),
        }
    return {
        "kind": "automatic",
        "description": discount.description,
        "amount": str(discount.amount.amount),
    }


def _discount_from_raw(raw: dict | None, currency: str) -> AppliedDiscount | None:
    if raw is None:
        return None
    amount = Money(Decimal(raw["amount"]), currency)
    if raw["kind"] == "manual":
        return ManualDiscount(
            rule_id=raw["rule_id"],
            code=raw["code"],
            percentage=raw["percentage"],
            description=raw.get("description", ""),
            amount=amount,
        )
    return AutomaticSavings(amount=amount, description=raw.get("description", ""))
