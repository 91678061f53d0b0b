"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.browse_catalog import (
    ListCategoriesHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Product
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.cli.errors import fail
from storefront.infrastructure.config import Settings


def _print_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<20} {'Brand':<14} {'Price':>10}  Tag")
    click.echo("-" * 60)
    for p in products:
        click.echo(
            f"{p.id:<8} {p.name:<20} {p.brand:<14} {str(p.price):>10}  {p.tag or ''}"
        )


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--tag", default=None, help="Only products with this tag (e.g. deal).")
@click.option("--query", "-q", default=None, help="Match name or brand (case-insensitive).")
@click.pass_obj
def product_list(config: Settings, category: str | None, tag: str | None, query: str | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repository(config))
    try:
        products = handler.handle(category=category, tag=tag, query=query)
    except DomainException as exc:
        raise fail(exc)
    _print_products(products)


@click.command("deals")
@click.pass_obj
def product_deals(config: Settings) -> None:
    """List products on deal (25% off)."""
    try:
        products = ListProductsHandler(product_repository(config)).deals()
    except DomainException as exc:
        raise fail(exc)
    _print_products(products)


@click.command("categories")
@click.pass_obj
def product_categories(config: Settings) -> None:
    """List catalog categories."""
    try:
        categories = ListCategoriesHandler(product_repository(config)).handle()
    except DomainException as exc:
        raise fail(exc)
    for category in categories:
        click.echo(category)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(config: Settings, product_id: str) -> None:
    """Show a single product."""
    try:
        p = ShowProductHandler(product_repository(config)).handle(product_id)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"{p.name} ({p.brand})  #{p.id}")
    click.echo(f"Price:    {p.price}")
    if p.category:
        click.echo(f"Category: {p.category}")
    if p.tag:
        click.echo(f"Tag:      {p.tag}")
    if p.rating is not None:
        click.echo(f"Rating:   {p.rating}/5")
    if p.stock_tag:
        click.echo(f"Stock:    {p.stock_tag}")
