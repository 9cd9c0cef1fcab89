"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import LineItem, total_of
from storefront.domain.model.invoice import Invoice


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str
    image_ref: str


@dataclass(frozen=True)
class CartDTO:

    owner_id: str
    items: list[LineItemDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class InvoiceDTO:

    id: str
    owner_id: str
    items: list[LineItemDTO]
    total: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def line_item_to_dto(item: LineItem) -> LineItemDTO:
    return LineItemDTO(
        product_id=item.product_id,
        name=item.name,
        quantity=item.quantity.value,
        unit_price=str(item.unit_price),
        line_total=str(item.line_total),
        image_ref=item.image_ref,
    )


def cart_to_dto(owner_id: str, items: list[LineItem]) -> CartDTO:
    return CartDTO(
        owner_id=owner_id,
        items=[line_item_to_dto(item) for item in items],
        total=str(total_of(items)),
    )


def invoice_to_dto(invoice: Invoice) -> InvoiceDTO:
    return InvoiceDTO(
        id=invoice.id,
        owner_id=invoice.owner_id,
        items=[line_item_to_dto(item) for item in invoice.items],
        total=str(invoice.total),
        created_at=invoice.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
