"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import AddressSpec, DiscountSpec, OrderDTO, OrderItemSpec
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.render_invoice import RenderInvoiceHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    invoice_renderer,
    order_repository,
    product_repository,
    token_service,
)
from storefront.infrastructure.cli.auth_commands import TOKEN_OPTION
from storefront.infrastructure.cli.errors import fail
from storefront.infrastructure.config import Settings


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'p1:3,p2' into OrderItemSpec list (quantity defaults to 1)."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            specs.append(OrderItemSpec(product_id=pair))
            continue
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _authenticate(config: Settings, token: str | None) -> str:
    try:
        return token_service(config).verify(token)
    except DomainException as exc:
        raise fail(exc)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    if dto.customer_name:
        click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    if dto.discount_code:
        click.echo(f"  {'Discount (' + dto.discount_code + ')':<27} {'-' + dto.discount_amount:>20}")
    if dto.shipping != "$0.00":
        click.echo(f"  {'Shipping':<27} {dto.shipping:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@TOKEN_OPTION
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId'.")
@click.option("--discount-code", default=None, help="Discount code label.")
@click.option("--discount-amount", default=None, help="Amount the discount takes off.")
@click.option("--shipping", default="0", show_default=True, help="Shipping cost.")
@click.option("--address-name", default=None, help="Recipient name (shown on the invoice).")
@click.option("--street", default=None)
@click.option("--city", default=None)
@click.option("--country", default=None)
@click.pass_obj
def order_create(
    config: Settings,
    token: str | None,
    items: str,
    discount_code: str | None,
    discount_amount: str | None,
    shipping: str,
    address_name: str | None,
    street: str | None,
    city: str | None,
    country: str | None,
) -> None:
    """Place a new order."""
    owner_id = _authenticate(config, token)
    specs = _parse_items(items)

    discount = None
    if discount_code is not None or discount_amount is not None:
        discount = DiscountSpec(code=discount_code or "", amount=discount_amount or "0")

    address = None
    if any((address_name, street, city, country)):
        address = AddressSpec(name=address_name, street=street, city=city, country=country)

    handler = CreateOrderHandler(
        order_repo=order_repository(config),
        product_repo=product_repository(config),
    )

    try:
        dto = handler.handle(
            owner_id=owner_id,
            item_specs=specs,
            discount=discount,
            shipping=shipping,
            address=address,
        )
    except DomainException as exc:
        raise fail(exc)

    _display_order(dto)


@click.command("show")
@TOKEN_OPTION
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(config: Settings, token: str | None, order_id: str) -> None:
    """Show one of your orders."""
    owner_id = _authenticate(config, token)
    handler = ShowOrderHandler(order_repo=order_repository(config))

    try:
        dto = handler.handle(order_id, owner_id)
    except DomainException as exc:
        raise fail(exc)

    _display_order(dto)


@click.command("list")
@TOKEN_OPTION
@click.pass_obj
def order_list(config: Settings, token: str | None) -> None:
    """List your orders, newest first."""
    owner_id = _authenticate(config, token)
    try:
        orders = ListOrdersHandler(order_repository(config)).handle(owner_id)
    except DomainException as exc:
        raise fail(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<34} {'Created':<22} {'Items':>5} {'Total':>12}")
    click.echo("-" * 76)
    for dto in orders:
        click.echo(f"{dto.id:<34} {dto.created_at:<22} {len(dto.items):>5} {dto.total:>12}")


@click.command("invoice")
@TOKEN_OPTION
@click.option("--id", "order_id", required=True, help="Order ID to invoice.")
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False, writable=True), default=None,
    help="Write the invoice to a file instead of stdout.",
)
@click.pass_obj
def order_invoice(config: Settings, token: str | None, order_id: str, output: str | None) -> None:
    """Render the invoice for one of your orders."""
    owner_id = _authenticate(config, token)
    handler = RenderInvoiceHandler(order_repository(config), invoice_renderer(config))

    try:
        document = handler.handle(order_id, owner_id)
    except DomainException as exc:
        raise fail(exc)

    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(document.to_text())
        click.echo(f"Invoice for order {order_id} written to {output}")
    else:
        click.echo(document.to_text(), nl=False)
