"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, image_ref: str = "") -> Product:
        """Add a new product to the catalog under the next free ID."""
        return self._product_repo.add(name, Money.of(price), image_ref)
