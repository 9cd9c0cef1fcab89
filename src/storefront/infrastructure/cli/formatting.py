"""Shared output formatting for CLI commands."""

from __future__ import annotations

import click

from storefront.application.dto import InvoiceDTO


def display_invoice(dto: InvoiceDTO) -> None:
    click.echo(f"Invoice #{dto.id}")
    click.echo(f"Owner:    {dto.owner_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Invoice Total':<27} {dto.total:>20}")
