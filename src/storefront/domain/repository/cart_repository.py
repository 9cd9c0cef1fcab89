"""Abstract repository for the Cart aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Every mutation returns the owner's full, updated item
list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from storefront.domain.model.cart import CartLookup, LineItem
from storefront.domain.model.product import Product


class CartRepository(ABC):

    @abstractmethod
    def find(self, owner_id: str) -> CartLookup:
        """Return ``Found(cart)`` or ``Absent(owner_id)``."""

    @abstractmethod
    def get(self, owner_id: str) -> list[LineItem]:
        """Return the owner's items; empty if the owner has no cart."""

    @abstractmethod
    def add_item(self, owner_id: str, product: Product) -> list[LineItem]:
        """Add one unit of *product*, creating the cart if needed."""

    @abstractmethod
    def set_quantity(self, owner_id: str, product_id: str, quantity: int) -> list[LineItem]:
        """Replace a line's quantity; ``quantity <= 0`` removes the line."""

    @abstractmethod
    def remove_item(self, owner_id: str, product_id: str) -> list[LineItem]:
        """Remove a line if present; silently does nothing otherwise."""

    @abstractmethod
    def clear(self, owner_id: str) -> list[LineItem]:
        """Empty the owner's cart.  Never creates a cart."""

    @abstractmethod
    def exclusive(self) -> AbstractContextManager[None]:
        """Hold the carts write lock across several calls."""
