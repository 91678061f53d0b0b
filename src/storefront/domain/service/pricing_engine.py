"""Domain service: Pricing Engine.

Pure and deterministic: resolves cart items against the catalog and
computes line and order totals.  No I/O beyond catalog lookups and no
exceptions for expected failures: every failure path comes back as a
``PricingFailure`` value so callers see it in the signature and decide
how to surface it.

Rounding is half away from zero to cents, applied once per derived
figure:

    unit      = round2(price * 0.75) for deals, else price
    line      = round2(unit * qty)
    subtotal  = round2(sum(line))
    total     = max(0, round2(subtotal - discount + shipping))

Discount and shipping amounts are taken as supplied; there is no
coupon registry or shipping rate table behind them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import (
    DomainException,
    InvalidQuantityError,
    InvalidRequestError,
    ProductNotFoundError,
)
from storefront.domain.model.order import Discount, OrderLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity, round2
from storefront.domain.repository.product_repository import ProductRepository

DEAL_MULTIPLIER = Decimal("0.75")


@dataclass(frozen=True)
class CartItem:
    """Input: a product reference and how many units (defaults to 1)."""

    product_id: str
    quantity: int = 1


@dataclass(frozen=True)
class PricingFailure:
    """Why a cart could not be priced."""

    error: type[DomainException]
    message: str

    @property
    def kind(self) -> str:
        return self.error.kind

    def to_exception(self) -> DomainException:
        return self.error(self.message)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Money
    discount_amount: Money
    shipping: Money
    total: Money


@dataclass(frozen=True)
class PricedCart:
    lines: list[OrderLine]
    totals: OrderTotals


class PricingEngine:

    def __init__(self, catalog: ProductRepository) -> None:
        self._catalog = catalog

    @staticmethod
    def unit_price_of(product: Product) -> Money:
        """Deals sell at 25% off, everything else at list price."""
        if product.is_deal:
            return Money(round2(product.price.amount * DEAL_MULTIPLIER), product.price.currency)
        return product.price

    def price_line(self, item: CartItem) -> OrderLine | PricingFailure:
        """Resolve one cart item into a priced, snapshotted order line."""
        try:
            quantity = Quantity(item.quantity)
        except InvalidQuantityError as exc:
            return PricingFailure(
                InvalidQuantityError, f"{exc} (product '{item.product_id}')"
            )

        product = self._catalog.get_by_id(item.product_id)
        if product is None:
            return PricingFailure(
                ProductNotFoundError, f"Product not found: '{item.product_id}'"
            )

        try:
            unit = self.unit_price_of(product)
            line_total = Money(round2(unit.amount * quantity.value), unit.currency)
        except InvalidRequestError as exc:
            return PricingFailure(
                InvalidRequestError, f"{exc} (product '{item.product_id}')"
            )

        return OrderLine(
            product_id=product.id,
            name=product.name,
            brand=product.brand,
            image=product.image,
            tag=product.tag,
            quantity=quantity,
            unit_price=unit,
            line_total=line_total,
        )

    def price_order(
        self,
        lines: list[OrderLine],
        discount: Discount | None = None,
        shipping: Money | None = None,
    ) -> OrderTotals | PricingFailure:
        """Aggregate already-priced lines into order totals."""
        if not lines:
            return PricingFailure(InvalidRequestError, "Cart items required")

        shipping = shipping if shipping is not None else Money.zero()
        discount_amount = discount.amount if discount is not None else Money.zero()

        try:
            subtotal = round2(sum((line.line_total.amount for line in lines), Decimal("0")))
            total = round2(subtotal - discount_amount.amount + shipping.amount)
        except InvalidRequestError as exc:
            return PricingFailure(InvalidRequestError, str(exc))

        return OrderTotals(
            subtotal=Money(subtotal),
            discount_amount=discount_amount,
            shipping=shipping,
            total=Money(max(Decimal("0.00"), total)),
        )

    def price_cart(
        self,
        items: list[CartItem],
        discount: Discount | None = None,
        shipping: Money | None = None,
    ) -> PricedCart | PricingFailure:
        """Price a whole cart; the first failing item aborts the lot."""
        if not items:
            return PricingFailure(InvalidRequestError, "Cart items required")

        lines: list[OrderLine] = []
        for item in items:
            line = self.price_line(item)
            if isinstance(line, PricingFailure):
                return line
            lines.append(line)

        totals = self.price_order(lines, discount, shipping)
        if isinstance(totals, PricingFailure):
            return totals
        return PricedCart(lines=lines, totals=totals)
