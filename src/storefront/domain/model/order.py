"""Order aggregate — the core of the domain.

An Order is priced exactly once, at creation, and stored with its
line snapshots and totals.  After that only ``status`` may change,
and no transition out of CREATED is defined.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from storefront.domain.exceptions import InvalidRequestError
from storefront.domain.model.product import DEAL_TAG
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    CREATED = "created"


@dataclass(frozen=True)
class OrderLine:
    """Captures the product snapshot and price paid at order-creation time.

    Invoices read these fields, never the catalog, so they keep showing
    the price paid even after the catalog changes.
    """

    product_id: str
    name: str
    brand: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    line_total: Money
    image: str | None = None
    tag: str | None = None

    @property
    def is_deal(self) -> bool:
        return self.tag == DEAL_TAG


@dataclass(frozen=True)
class Discount:
    """A discount code as supplied by the caller (not checked against a registry)."""

    code: str
    amount: Money


@dataclass(frozen=True)
class Address:
    name: str | None = None
    street: str | None = None
    city: str | None = None
    country: str | None = None


def new_order_id() -> str:
    return uuid4().hex


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders — it enforces the
    creation rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str
    owner_id: str
    items: list[OrderLine]
    subtotal: Money
    total: Money
    shipping: Money = field(default_factory=Money.zero)
    discount: Discount | None = None
    address: Address | None = None
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        owner_id: str,
        items: list[OrderLine],
        subtotal: Money,
        total: Money,
        shipping: Money,
        discount: Discount | None = None,
        address: Address | None = None,
    ) -> Order:
        """Create a new order with a fresh id, enforcing all invariants."""
        if not owner_id:
            raise InvalidRequestError("Order owner is required")

        if not items:
            raise InvalidRequestError("Order must contain at least one item")

        return Order(
            id=new_order_id(),
            owner_id=owner_id,
            items=list(items),
            subtotal=subtotal,
            total=total,
            shipping=shipping,
            discount=discount,
            address=address,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def customer_name(self) -> str | None:
        return self.address.name if self.address else None
