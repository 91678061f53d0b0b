"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import (
    Address,
    Discount,
    Order,
    OrderLine,
    OrderStatus,
)
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        raw = self._to_raw(order)
        self._collection.update(lambda orders: orders.append(raw))

    def get_by_id(self, order_id: str, owner_id: str) -> Order | None:
        for raw in self._collection.load():
            if raw["id"] == order_id and raw["owner_id"] == owner_id:
                return self._to_domain(raw)
        return None

    def list_by_owner(self, owner_id: str) -> list[Order]:
        orders = [
            self._to_domain(raw)
            for raw in self._collection.load()
            if raw["owner_id"] == owner_id
        ]
        # Later insertions win ties on created_at
        orders.reverse()
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "owner_id": order.owner_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "currency": order.total.currency,
            "items": [
                {
                    "product_id": line.product_id,
                    "name": line.name,
                    "brand": line.brand,
                    "image": line.image,
                    "tag": line.tag,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "line_total": str(line.line_total.amount),
                }
                for line in order.items
            ],
            "subtotal": str(order.subtotal.amount),
            "shipping": str(order.shipping.amount),
            "discount": (
                {"code": order.discount.code, "amount": str(order.discount.amount.amount)}
                if order.discount
                else None
            ),
            "total": str(order.total.amount),
            "address": (
                {
                    "name": order.address.name,
                    "street": order.address.street,
                    "city": order.address.city,
                    "country": order.address.country,
                }
                if order.address
                else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")

        def money(value: str) -> Money:
            return Money(Decimal(value), currency)

        items = [
            OrderLine(
                product_id=i["product_id"],
                name=i["name"],
                brand=i["brand"],
                image=i.get("image"),
                tag=i.get("tag"),
                quantity=Quantity(i["quantity"]),
                unit_price=money(i["unit_price"]),
                line_total=money(i["line_total"]),
            )
            for i in raw["items"]
        ]
        discount = raw.get("discount")
        address = raw.get("address")
        return Order(
            id=raw["id"],
            owner_id=raw["owner_id"],
            items=items,
            subtotal=money(raw["subtotal"]),
            total=money(raw["total"]),
            shipping=money(raw.get("shipping", "0")),
            discount=Discount(discount["code"], money(discount["amount"])) if discount else None,
            address=Address(**address) if address else None,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
