"""CartRepository on top of a RecordStore.

Every mutation follows the same discipline under the carts lock:
load the whole collection, locate or create the owner's cart, apply one
change, write the whole collection back.
"""

from __future__ import annotations

from contextlib import AbstractContextManager

import structlog

from storefront.domain.exceptions import CartNotFoundError
from storefront.domain.model.cart import Absent, Cart, CartLookup, Found, LineItem
from storefront.domain.model.product import Product
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.record_store import RecordStore
from storefront.infrastructure.persistence.records import (
    line_item_to_domain,
    line_item_to_raw,
    map_records,
)

CARTS = "carts"

log = structlog.get_logger(__name__)


class StoreCartRepository(CartRepository):

    def __init__(self, store: RecordStore, collection: str = CARTS) -> None:
        self._store = store
        self._collection = collection
        self._store.ensure(collection)

    # --- CartRepository interface ---------------------------------------------

    def find(self, owner_id: str) -> CartLookup:
        cart = self._find_in(self._load(), owner_id)
        if cart is None:
            return Absent(owner_id)
        return Found(cart)

    def get(self, owner_id: str) -> list[LineItem]:
        lookup = self.find(owner_id)
        if isinstance(lookup, Found):
            return list(lookup.cart.items)
        return []

    def add_item(self, owner_id: str, product: Product) -> list[LineItem]:
        with self._store.lock(self._collection):
            carts = self._load()
            cart = self._find_in(carts, owner_id)
            if cart is None:
                cart = Cart(owner_id=owner_id)
                carts.append(cart)
            cart.add_product(product)
            self._persist(carts)

        log.info("cart_item_added", owner_id=owner_id, product_id=product.id)
        return list(cart.items)

    def set_quantity(self, owner_id: str, product_id: str, quantity: int) -> list[LineItem]:
        with self._store.lock(self._collection):
            carts = self._load()
            cart = self._find_in(carts, owner_id)
            if cart is None:
                raise CartNotFoundError(owner_id)
            cart.set_quantity(product_id, quantity)
            self._persist(carts)

        log.info(
            "cart_quantity_set",
            owner_id=owner_id,
            product_id=product_id,
            quantity=max(quantity, 0),
        )
        return list(cart.items)

    def remove_item(self, owner_id: str, product_id: str) -> list[LineItem]:
        with self._store.lock(self._collection):
            carts = self._load()
            cart = self._find_in(carts, owner_id)
            if cart is None:
                return []
            if cart.remove_item(product_id):
                self._persist(carts)
                log.info("cart_item_removed", owner_id=owner_id, product_id=product_id)
        return list(cart.items)

    def clear(self, owner_id: str) -> list[LineItem]:
        with self._store.lock(self._collection):
            carts = self._load()
            cart = self._find_in(carts, owner_id)
            if cart is not None:
                cart.clear()
                self._persist(carts)
                log.info("cart_cleared", owner_id=owner_id, revision=cart.revision)
        return []

    def exclusive(self) -> AbstractContextManager[None]:
        return self._store.lock(self._collection)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "owner_id": cart.owner_id,
            "revision": cart.revision,
            "items": [line_item_to_raw(item) for item in cart.items],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            owner_id=raw["owner_id"],
            items=[line_item_to_domain(i) for i in raw["items"]],
            revision=int(raw.get("revision", 0)),
        )

    # --- Store helpers --------------------------------------------------------

    def _load(self) -> list[Cart]:
        return map_records(self._collection, self._store.load_all(self._collection), self._to_domain)

    def _persist(self, carts: list[Cart]) -> None:
        self._store.replace_all(self._collection, [self._to_raw(c) for c in carts])

    @staticmethod
    def _find_in(carts: list[Cart], owner_id: str) -> Cart | None:
        for cart in carts:
            if cart.owner_id == owner_id:
                return cart
        return None
