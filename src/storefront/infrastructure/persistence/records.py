"""Raw <-> domain mapping shared by the store-backed repositories.

Malformed records are reported as StoreCorruptError naming the
collection, never as a bare KeyError.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from storefront.domain.exceptions import StoreCorruptError, ValidationError
from storefront.domain.model.cart import LineItem
from storefront.domain.model.value_objects import Money, Quantity

T = TypeVar("T")


def line_item_to_raw(item: LineItem) -> dict:
    return {
        "product_id": item.product_id,
        "name": item.name,
        "unit_price": str(item.unit_price.amount),
        "quantity": item.quantity.value,
        "image_ref": item.image_ref,
    }


def line_item_to_domain(raw: dict) -> LineItem:
    return LineItem(
        product_id=str(raw["product_id"]),
        name=raw["name"],
        unit_price=Money(Decimal(str(raw["unit_price"]))),
        quantity=Quantity(raw["quantity"]),
        image_ref=raw.get("image_ref", ""),
    )


def map_records(collection: str, records: list[dict], to_domain: Callable[[dict], T]) -> list[T]:
    try:
        return [to_domain(raw) for raw in records]
    except (KeyError, TypeError, InvalidOperation, ValueError, ValidationError) as exc:
        raise StoreCorruptError(collection, f"malformed record ({exc!r})") from exc
