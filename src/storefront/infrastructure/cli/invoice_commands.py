"""CLI commands for purchase history."""

from __future__ import annotations

import click

from storefront.application.show_invoices import ShowInvoicesHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import invoice_ledger
from storefront.infrastructure.cli.errors import storage_unavailable
from storefront.infrastructure.cli.formatting import display_invoice


@click.command("list")
@click.option("--owner", required=True, help="Owner id (e-mail).")
def invoice_list(owner: str) -> None:
    """List every invoice of an owner, oldest first."""
    try:
        handler = ShowInvoicesHandler(ledger=invoice_ledger())
        invoices = handler.handle(owner)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise storage_unavailable(exc)

    if not invoices:
        click.echo(f"No invoices found for {owner}.")
        return

    for i, dto in enumerate(invoices):
        if i:
            click.echo()
        display_invoice(dto)
