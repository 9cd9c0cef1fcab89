"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import ItemNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


class TestAddProduct:

    def test_first_add_creates_line_with_quantity_one(self):
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("1", "Widget", "10.00"))

        assert len(cart.items) == 1
        item = cart.items[0]
        assert item.product_id == "1"
        assert item.name == "Widget"
        assert item.quantity.value == 1
        assert item.unit_price == Money.of("10.00")
        assert item.image_ref == "/img/widget.png"

    def test_same_product_merges_instead_of_duplicating(self):
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("1"))
        cart.add_product(make_product("1"))

        assert len(cart.items) == 1
        assert cart.items[0].quantity.value == 2

    def test_distinct_products_keep_insertion_order(self):
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("2", "Gadget"))
        cart.add_product(make_product("1", "Widget"))

        assert [i.product_id for i in cart.items] == ["2", "1"]


class TestSetQuantity:

    def _cart(self) -> Cart:
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("1"))
        return cart

    def test_positive_value_replaces_quantity(self):
        cart = self._cart()
        cart.set_quantity("1", 5)
        cart.set_quantity("1", 3)
        assert cart.items[0].quantity.value == 3

    @pytest.mark.parametrize("quantity", [0, -5])
    def test_non_positive_value_removes_line(self, quantity):
        cart = self._cart()
        cart.set_quantity("1", quantity)
        assert cart.is_empty

    def test_unknown_product_rejected(self):
        cart = self._cart()
        with pytest.raises(ItemNotFoundError) as exc_info:
            cart.set_quantity("99", 2)
        assert exc_info.value.owner_id == "alice@example.com"
        assert exc_info.value.product_id == "99"


class TestRemoveAndClear:

    def test_remove_present_item(self):
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("1"))
        assert cart.remove_item("1") is True
        assert cart.is_empty

    def test_remove_absent_item_is_noop(self):
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("1"))
        revision = cart.revision

        assert cart.remove_item("99") is False
        assert len(cart.items) == 1
        assert cart.revision == revision

    def test_clear_empties_cart(self):
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("1"))
        cart.clear()
        assert cart.is_empty


class TestRevisionAndTotal:

    def test_every_change_bumps_revision(self):
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("1"))
        cart.add_product(make_product("1"))
        cart.set_quantity("1", 4)
        cart.clear()
        assert cart.revision == 4

    def test_total_sums_line_totals(self):
        cart = Cart(owner_id="alice@example.com")
        cart.add_product(make_product("1", "Widget", "10.00"))
        cart.add_product(make_product("1", "Widget", "10.00"))
        cart.add_product(make_product("2", "Gadget", "5.00"))
        assert cart.total == Money.of("25.00")
