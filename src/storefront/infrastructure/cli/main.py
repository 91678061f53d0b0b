import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.auth_commands import auth_signin, auth_signup, auth_whoami
from storefront.infrastructure.cli.order_commands import (
    order_create,
    order_invoice,
    order_list,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_categories,
    product_deals,
    product_list,
    product_show,
)
from storefront.infrastructure.structured_logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront: catalog, orders and invoices"""
    config = settings()
    configure_logging(config.log_level)
    ctx.obj = config


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def order() -> None:
    """Place and inspect orders."""


@cli.group()
def auth() -> None:
    """Accounts and tokens."""


# Register subcommands
product.add_command(product_categories)
product.add_command(product_deals)
product.add_command(product_list)
product.add_command(product_show)
order.add_command(order_create)
order.add_command(order_invoice)
order.add_command(order_list)
order.add_command(order_show)
auth.add_command(auth_signin)
auth.add_command(auth_signup)
auth.add_command(auth_whoami)
