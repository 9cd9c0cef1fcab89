"""CLI commands for the shopper's cart and checkout."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    invoice_ledger,
    product_repository,
)
from storefront.infrastructure.cli.errors import storage_unavailable
from storefront.infrastructure.cli.formatting import display_invoice

owner_option = click.option("--owner", required=True, help="Owner id (e-mail).")
product_option = click.option("--product", "product_id", required=True, help="Product ID.")


def _display_cart(dto: CartDTO) -> None:
    if dto.is_empty:
        click.echo(f"Cart of {dto.owner_id} is empty.")
        return

    click.echo(f"Cart of {dto.owner_id}")
    click.echo()
    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Cart Total':<34} {dto.total:>20}")


@click.command("show")
@owner_option
def cart_show(owner: str) -> None:
    """Show the contents of a cart."""
    try:
        handler = ShowCartHandler(cart_repo=cart_repository())
        dto = handler.handle(owner)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise storage_unavailable(exc)

    _display_cart(dto)


@click.command("add")
@owner_option
@product_option
def cart_add(owner: str, product_id: str) -> None:
    """Add one unit of a catalog product to a cart."""
    try:
        handler = AddToCartHandler(
            cart_repo=cart_repository(),
            product_repo=product_repository(),
        )
        dto = handler.handle(owner_id=owner, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise storage_unavailable(exc)

    _display_cart(dto)


@click.command("update")
@owner_option
@product_option
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(owner: str, product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in the cart."""
    try:
        handler = UpdateCartItemHandler(cart_repo=cart_repository())
        dto = handler.handle(owner_id=owner, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise storage_unavailable(exc)

    _display_cart(dto)


@click.command("remove")
@owner_option
@product_option
def cart_remove(owner: str, product_id: str) -> None:
    """Remove a product from the cart."""
    try:
        handler = RemoveFromCartHandler(cart_repo=cart_repository())
        dto = handler.handle(owner_id=owner, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise storage_unavailable(exc)

    _display_cart(dto)


@click.command("checkout")
@owner_option
def cart_checkout(owner: str) -> None:
    """Turn the cart into an invoice and empty it."""
    try:
        handler = CheckoutHandler(cart_repo=cart_repository(), ledger=invoice_ledger())
        dto = handler.handle(owner)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise storage_unavailable(exc)

    click.echo("Purchase completed.")
    display_invoice(dto)
