"""Integration tests for the cart use cases.

Uses an in-memory record store — no file I/O.
"""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import (
    CartNotFoundError,
    EntityNotFoundError,
    ItemNotFoundError,
    ValidationError,
)
from storefront.domain.model.product import Product
from storefront.infrastructure.persistence.store_cart_repository import StoreCartRepository
from storefront.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)
from tests.fakes import InMemoryRecordStore

OWNER = "alice@example.com"


def _setup():
    """Build repos over one store, with a two-product catalog."""
    store = InMemoryRecordStore()
    cart_repo = StoreCartRepository(store)
    product_repo = StoreProductRepository(store)
    add_product = AddProductHandler(product_repo)
    add_product.handle("Widget", "10.00", "/img/widget.png")
    add_product.handle("Gadget", "5.00")
    return cart_repo, product_repo


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        _, product_repo = _setup()
        assert [p.id for p in product_repo.list_all()] == ["1", "2"]

    def test_blank_name_rejected(self):
        _, product_repo = _setup()
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(product_repo).handle("  ", "1.00")

    def test_negative_price_rejected(self):
        _, product_repo = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(product_repo).handle("Broken", "-1")

    def test_zero_price_rejected(self):
        _, product_repo = _setup()
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(product_repo).handle("Freebie", "0.00")
        assert len(product_repo.list_all()) == 2

    def test_image_is_optional(self):
        _, product_repo = _setup()
        assert product_repo.get_by_id("2").image_ref == ""


class TestAddToCart:

    def test_returns_updated_cart(self):
        cart_repo, product_repo = _setup()
        handler = AddToCartHandler(cart_repo, product_repo)

        handler.handle(OWNER, "1")
        dto = handler.handle(OWNER, "1")

        assert len(dto.items) == 1
        assert dto.items[0].quantity == 2
        assert dto.items[0].line_total == "$20.00"
        assert dto.total == "$20.00"

    def test_unknown_product_rejected(self):
        cart_repo, product_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            AddToCartHandler(cart_repo, product_repo).handle(OWNER, "42")
        assert cart_repo.get(OWNER) == []

    def test_price_snapshot_at_add_time(self):
        cart_repo, product_repo = _setup()
        AddToCartHandler(cart_repo, product_repo).handle(OWNER, "1")

        widget = product_repo.get_by_id("1")
        product_repo.save(Product.create("1", "Widget", widget.unit_price * 9))

        assert ShowCartHandler(cart_repo).handle(OWNER).total == "$10.00"


class TestShowCart:

    def test_unknown_owner_has_empty_cart(self):
        cart_repo, _ = _setup()
        dto = ShowCartHandler(cart_repo).handle("nobody@example.com")
        assert dto.is_empty
        assert dto.total == "$0.00"


class TestUpdateAndRemove:

    def _with_widget(self):
        cart_repo, product_repo = _setup()
        AddToCartHandler(cart_repo, product_repo).handle(OWNER, "1")
        return cart_repo

    def test_update_sets_exact_quantity(self):
        cart_repo = self._with_widget()
        dto = UpdateCartItemHandler(cart_repo).handle(OWNER, "1", 4)
        assert dto.items[0].quantity == 4
        assert dto.total == "$40.00"

    def test_update_to_zero_removes(self):
        cart_repo = self._with_widget()
        assert UpdateCartItemHandler(cart_repo).handle(OWNER, "1", 0).is_empty

    def test_update_without_cart_rejected(self):
        cart_repo, _ = _setup()
        with pytest.raises(CartNotFoundError):
            UpdateCartItemHandler(cart_repo).handle(OWNER, "1", 2)

    def test_update_of_missing_item_rejected(self):
        cart_repo = self._with_widget()
        with pytest.raises(ItemNotFoundError):
            UpdateCartItemHandler(cart_repo).handle(OWNER, "2", 2)

    def test_remove(self):
        cart_repo = self._with_widget()
        assert RemoveFromCartHandler(cart_repo).handle(OWNER, "1").is_empty

    def test_remove_missing_item_is_noop(self):
        cart_repo = self._with_widget()
        dto = RemoveFromCartHandler(cart_repo).handle(OWNER, "2")
        assert [i.product_id for i in dto.items] == ["1"]
