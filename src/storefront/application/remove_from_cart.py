"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.repository.cart_repository import CartRepository


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, owner_id: str, product_id: str) -> CartDTO:
        return cart_to_dto(owner_id, self._cart_repo.remove_item(owner_id, product_id))
