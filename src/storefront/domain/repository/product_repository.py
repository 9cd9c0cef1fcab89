"""Abstract repository for catalog products."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def add(self, name: str, unit_price: Money, image_ref: str = "") -> Product:
        """Create a product under the next free numeric ID and persist it."""
