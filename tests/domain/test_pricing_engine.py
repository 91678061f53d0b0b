"""Unit tests for the PricingEngine domain service."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import (
    InvalidQuantityError,
    InvalidRequestError,
    ProductNotFoundError,
)
from storefront.domain.model.order import Discount
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing_engine import (
    CartItem,
    OrderTotals,
    PricedCart,
    PricingEngine,
    PricingFailure,
)
from tests.fakes import FakeProductRepository, make_product


def _engine() -> PricingEngine:
    return PricingEngine(
        FakeProductRepository(
            [
                make_product("p1", "Trek", price="100.00", tag="deal"),
                make_product("p2", "Haro", price="1050.00"),
                make_product("p3", "Merida", price="600.50", tag="deal"),
                make_product("p4", "Bell", price="19.99", tag="new"),
            ]
        )
    )


class TestUnitPrice:

    @pytest.mark.parametrize(
        "price, expected",
        [("100.00", "75.00"), ("600.50", "450.38"), ("0.10", "0.08"), ("19.99", "14.99")],
    )
    def test_deal_is_25_percent_off_rounded_half_up(self, price, expected):
        product = make_product(price=price, tag="deal")
        assert PricingEngine.unit_price_of(product).amount == Decimal(expected)

    @pytest.mark.parametrize("tag", [None, "new", "Deal"])
    def test_non_deal_keeps_list_price(self, tag):
        product = make_product(price="19.99", tag=tag)
        assert PricingEngine.unit_price_of(product) == Money.of("19.99")


class TestPriceLine:

    def test_deal_line(self):
        line = _engine().price_line(CartItem("p1", 2))
        assert not isinstance(line, PricingFailure)
        assert line.unit_price == Money.of("75.00")
        assert line.line_total == Money.of("150.00")
        assert line.quantity.value == 2

    def test_line_snapshots_product(self):
        line = _engine().price_line(CartItem("p1"))
        assert (line.product_id, line.name, line.brand, line.tag) == ("p1", "Trek", "ACME", "deal")

    def test_quantity_defaults_to_one(self):
        line = _engine().price_line(CartItem("p2"))
        assert line.quantity.value == 1
        assert line.line_total == Money.of("1050.00")

    def test_unknown_product_is_a_failure_value(self):
        result = _engine().price_line(CartItem("nope", 1))
        assert isinstance(result, PricingFailure)
        assert result.error is ProductNotFoundError
        assert result.kind == "product_not_found"

    @pytest.mark.parametrize("qty", [0, -1, 1.5, "2", True])
    def test_bad_quantity_is_a_failure_value(self, qty):
        result = _engine().price_line(CartItem("p1", qty))
        assert isinstance(result, PricingFailure)
        assert result.error is InvalidQuantityError
        assert isinstance(result.to_exception(), InvalidRequestError)

    def test_quantity_too_large_to_price_is_a_failure_value(self):
        result = _engine().price_line(CartItem("p1", 10**27))
        assert isinstance(result, PricingFailure)
        assert result.error is InvalidRequestError
        assert result.kind == "invalid_request"
        assert "p1" in result.message


class TestPriceOrder:

    def _lines(self, *items):
        engine = _engine()
        return engine, [engine.price_line(i) for i in items]

    def test_no_discount_no_shipping(self):
        engine, lines = self._lines(CartItem("p1", 2))
        totals = engine.price_order(lines)
        assert isinstance(totals, OrderTotals)
        assert totals.subtotal == Money.of("150.00")
        assert totals.total == Money.of("150.00")

    def test_discount_and_shipping(self):
        engine, lines = self._lines(CartItem("p1", 2))
        totals = engine.price_order(
            lines, Discount("SAVE20", Money.of("20.00")), Money.of("10.00")
        )
        assert totals.total == Money.of("140.00")
        assert totals.discount_amount == Money.of("20.00")
        assert totals.shipping == Money.of("10.00")

    def test_total_never_negative(self):
        engine, lines = self._lines(CartItem("p4", 1))
        totals = engine.price_order(lines, Discount("HUGE", Money.of("500")), Money.zero())
        assert totals.total == Money.of("0.00")

    def test_subtotal_sums_lines(self):
        engine, lines = self._lines(CartItem("p1", 2), CartItem("p3", 3), CartItem("p4", 1))
        totals = engine.price_order(lines)
        # 150.00 + 3 * 450.38 + 19.99
        assert totals.subtotal.amount == Decimal("1521.13")

    def test_shipping_too_large_to_price_is_a_failure_value(self):
        engine, lines = self._lines(CartItem("p1", 1))
        result = engine.price_order(lines, shipping=Money.of("1e30"))
        assert isinstance(result, PricingFailure)
        assert result.kind == "invalid_request"

    def test_empty_lines_is_invalid_request(self):
        result = _engine().price_order([])
        assert isinstance(result, PricingFailure)
        assert result.error is InvalidRequestError


class TestPriceCart:

    def test_happy_path(self):
        priced = _engine().price_cart([CartItem("p1", 2), CartItem("p2")])
        assert isinstance(priced, PricedCart)
        assert [line.product_id for line in priced.lines] == ["p1", "p2"]
        assert priced.totals.total == Money.of("1200.00")

    def test_empty_cart(self):
        result = _engine().price_cart([])
        assert isinstance(result, PricingFailure)
        assert result.kind == "invalid_request"

    def test_one_unknown_product_aborts_the_cart(self):
        result = _engine().price_cart([CartItem("p1"), CartItem("ghost"), CartItem("p2")])
        assert isinstance(result, PricingFailure)
        assert "ghost" in result.message

    def test_pricing_is_deterministic(self):
        engine = _engine()
        cart = [CartItem("p3", 7), CartItem("p4", 2)]
        assert engine.price_cart(cart) == engine.price_cart(cart)
