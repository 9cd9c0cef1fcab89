"""Application service: Update Cart Item use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.repository.cart_repository import CartRepository


class UpdateCartItemHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, owner_id: str, product_id: str, quantity: int) -> CartDTO:
        """Set the exact quantity of a line.  Zero or less removes it."""
        items = self._cart_repo.set_quantity(owner_id, product_id, quantity)
        return cart_to_dto(owner_id, items)
