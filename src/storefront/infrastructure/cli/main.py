import click

from storefront.infrastructure.bootstrap import log_level
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.invoice_commands import invoice_list
from storefront.infrastructure.cli.product_commands import product_add, product_list
from storefront.infrastructure.log_config import configure_logging


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """Storefront — carts, checkout and invoices"""
    configure_logging("INFO" if verbose else log_level())


@cli.group()
def cart() -> None:
    """Manage a shopper's cart."""


@cli.group()
def invoice() -> None:
    """Browse purchase history."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
invoice.add_command(invoice_list)
product.add_command(product_add)
product.add_command(product_list)
