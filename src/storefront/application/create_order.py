"""Application service: Create Order use case.

Orchestrates the flow between the catalog, the pricing engine and the
order repository.  Everything is validated and priced before anything
is written, so a rejected cart never leaves a partial order behind.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import (
    AddressSpec,
    DiscountSpec,
    OrderDTO,
    OrderItemSpec,
    order_to_dto,
)
from storefront.domain.exceptions import InvalidRequestError
from storefront.domain.model.order import Address, Discount, Order
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.pricing_engine import (
    CartItem,
    PricingEngine,
    PricingFailure,
)

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._pricing = PricingEngine(product_repo)

    def handle(
        self,
        owner_id: str,
        item_specs: list[OrderItemSpec],
        discount: DiscountSpec | None = None,
        shipping: str | int = "0",
        address: AddressSpec | None = None,
    ) -> OrderDTO:
        """Place a new order for *owner_id*.

        Steps:
        1. Validate discount and shipping inputs.
        2. Price the cart (snapshotting each product at current prices).
        3. Let the Order aggregate check its creation rules.
        4. Persist and return a DTO.
        """
        applied_discount = self._to_discount(discount)
        priced = self._pricing.price_cart(
            [CartItem(spec.product_id, spec.quantity) for spec in item_specs],
            discount=applied_discount,
            shipping=self._to_shipping(shipping),
        )
        if isinstance(priced, PricingFailure):
            logger.info(
                "order.rejected", owner_id=owner_id, kind=priced.kind, reason=priced.message
            )
            raise priced.to_exception()

        order = Order.create(
            owner_id=owner_id,
            items=priced.lines,
            subtotal=priced.totals.subtotal,
            total=priced.totals.total,
            shipping=priced.totals.shipping,
            discount=applied_discount,
            address=self._to_address(address),
        )
        self._order_repo.add(order)

        logger.info(
            "order.created",
            order_id=order.id,
            owner_id=owner_id,
            lines=len(order.items),
            total=str(order.total.amount),
        )
        return order_to_dto(order)

    # --- Input mapping --------------------------------------------------------

    @staticmethod
    def _to_discount(spec: DiscountSpec | None) -> Discount | None:
        if spec is None:
            return None
        if not spec.code or not spec.code.strip():
            raise InvalidRequestError("Discount code is required when a discount is given")
        return Discount(code=spec.code.strip(), amount=Money.of(spec.amount))

    @staticmethod
    def _to_shipping(shipping: str | int | None) -> Money:
        if shipping is None or shipping == "":
            return Money.zero()
        return Money.of(shipping)

    @staticmethod
    def _to_address(spec: AddressSpec | None) -> Address | None:
        if spec is None:
            return None
        return Address(
            name=spec.name, street=spec.street, city=spec.city, country=spec.country
        )
