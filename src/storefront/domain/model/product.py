"""Product — the catalog entry a shopper puts into a cart.

The cart core trusts whatever Product it is handed; the catalog only
exists so the CLI has something to add.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:

    id: str
    name: str
    unit_price: Money
    image_ref: str = ""

    @staticmethod
    def create(product_id: str, name: str, unit_price: Money, image_ref: str = "") -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if unit_price <= Money.zero():
            raise ValidationError("Product price must be greater than zero")
        return Product(
            id=product_id,
            name=name.strip(),
            unit_price=unit_price,
            image_ref=image_ref.strip(),
        )
