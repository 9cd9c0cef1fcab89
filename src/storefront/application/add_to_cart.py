"""Application service: Add To Cart use case.

Resolves the product through the catalog, then hands the product
snapshot to the cart repository.  The cart itself never checks the
catalog; it trusts what it is given.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, owner_id: str, product_id: str) -> CartDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        items = self._cart_repo.add_item(owner_id, product)
        return cart_to_dto(owner_id, items)
