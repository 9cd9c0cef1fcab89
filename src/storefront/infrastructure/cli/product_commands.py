"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.cli.errors import storage_unavailable


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00), greater than zero.")
@click.option("--image", "image_ref", default="", help="Image URL or path.")
def product_add(name: str, price: str, image_ref: str) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(product_repo=product_repository())
        product = handler.handle(name=name, price=price, image_ref=image_ref)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise storage_unavailable(exc)

    click.echo(f"Product #{product.id} '{product.name}' added at {product.unit_price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        products = product_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise storage_unavailable(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.unit_price):>10}")
