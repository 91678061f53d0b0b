"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.order import Order
from storefront.domain.model.user import User


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int = 1


@dataclass(frozen=True)
class DiscountSpec:
    """Input: a discount code and the amount it takes off."""

    code: str
    amount: str | Decimal | int


@dataclass(frozen=True)
class AddressSpec:
    name: str | None = None
    street: str | None = None
    city: str | None = None
    country: str | None = None


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    name: str
    brand: str
    quantity: int
    unit_price: str  # formatted, e.g. "$75.00"
    line_total: str
    tag: str | None


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    owner_id: str
    status: str
    items: list[OrderLineDTO]
    subtotal: str
    discount_code: str | None
    discount_amount: str | None
    shipping: str
    total: str
    customer_name: str | None
    created_at: str


@dataclass(frozen=True)
class UserDTO:
    id: str
    email: str
    name: str
    provider: str


@dataclass(frozen=True)
class AuthResultDTO:
    token: str
    user: UserDTO


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        owner_id=order.owner_id,
        status=order.status.value,
        items=[
            OrderLineDTO(
                product_id=line.product_id,
                name=line.name,
                brand=line.brand,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
                tag=line.tag,
            )
            for line in order.items
        ],
        subtotal=str(order.subtotal),
        discount_code=order.discount.code if order.discount else None,
        discount_amount=str(order.discount.amount) if order.discount else None,
        shipping=str(order.shipping),
        total=str(order.total),
        customer_name=order.customer_name,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(id=user.id, email=user.email, name=user.name, provider=user.provider)
