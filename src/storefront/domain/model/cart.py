"""Cart aggregate — one shopper's pending purchase.

A Cart is owned by exactly one owner id and holds an ordered list of
LineItems, at most one per product.  Carts are created implicitly on the
first add and emptied (never deleted) on checkout.

Every mutation that changes the cart bumps ``revision``.  The revision
is never reset, so an invoice stamped with it identifies the exact cart
contents it was cut from.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from storefront.domain.exceptions import ItemNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class LineItem:
    """One product entry in a cart or invoice, with its price snapshot."""

    product_id: str
    name: str
    unit_price: Money
    quantity: Quantity
    image_ref: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_product(product: Product) -> LineItem:
        return LineItem(
            product_id=product.id,
            name=product.name,
            unit_price=product.unit_price,
            quantity=Quantity(1),
            image_ref=product.image_ref,
        )


def total_of(items: list[LineItem] | tuple[LineItem, ...]) -> Money:
    result = Money.zero()
    for item in items:
        result = result + item.line_total
    return result


@dataclass
class Cart:
    """Aggregate root for a shopper's cart.

    Invariants:
    - at most one LineItem per ``product_id``
    - every stored quantity is >= 1
    """

    owner_id: str
    items: list[LineItem] = field(default_factory=list)
    revision: int = 0

    # --- Mutations ------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Add one unit of *product*, merging into an existing line."""
        index = self._index_of(product.id)
        if index is None:
            self.items.append(LineItem.from_product(product))
        else:
            item = self.items[index]
            self.items[index] = replace(item, quantity=item.quantity.incremented())
        self.revision += 1

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Replace a line's quantity; zero or less removes the line."""
        index = self._index_of(product_id)
        if index is None:
            raise ItemNotFoundError(self.owner_id, product_id)
        if quantity <= 0:
            del self.items[index]
        else:
            self.items[index] = replace(self.items[index], quantity=Quantity(quantity))
        self.revision += 1

    def remove_item(self, product_id: str) -> bool:
        """Drop the line for *product_id*.  Returns False if it was absent."""
        index = self._index_of(product_id)
        if index is None:
            return False
        del self.items[index]
        self.revision += 1
        return True

    def clear(self) -> None:
        self.items = []
        self.revision += 1

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total(self) -> Money:
        return total_of(self.items)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: str) -> int | None:
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                return i
        return None


# ---------------------------------------------------------------------------
# Lookup result: "no cart yet" is not the same thing as "empty cart"
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Found:
    cart: Cart


@dataclass(frozen=True)
class Absent:
    owner_id: str


CartLookup = Found | Absent
