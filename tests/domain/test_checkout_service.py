"""Tests for the CheckoutService coordinator.

Runs against the store-backed repositories over an in-memory record
store, so the full load/modify/replace path is exercised without disk.
"""

import pytest
from structlog.testing import capture_logs

from storefront.domain.exceptions import EmptyCartError
from storefront.domain.model.cart import Found
from storefront.domain.model.value_objects import Money
from storefront.domain.service.checkout_service import CheckoutService
from storefront.infrastructure.persistence.store_cart_repository import StoreCartRepository
from storefront.infrastructure.persistence.store_invoice_ledger import StoreInvoiceLedger
from tests.fakes import FailingReplaceStore, InMemoryRecordStore, make_product

OWNER = "alice@example.com"


def _setup(store=None):
    store = store or InMemoryRecordStore()
    carts = StoreCartRepository(store)
    ledger = StoreInvoiceLedger(store)
    return CheckoutService(carts, ledger), carts, ledger, store


def _fill(carts: StoreCartRepository) -> None:
    widget = make_product("1", "Widget", "10")
    carts.add_item(OWNER, widget)
    carts.add_item(OWNER, widget)
    carts.add_item(OWNER, make_product("2", "Gadget", "5"))


class TestCheckoutHappyPath:

    def test_total_is_sum_of_price_times_quantity(self):
        service, carts, _, _ = _setup()
        _fill(carts)

        invoice = service.checkout(OWNER)

        assert invoice.total == Money.of("25")
        assert invoice.owner_id == OWNER
        assert [(i.product_id, i.quantity.value) for i in invoice.items] == [("1", 2), ("2", 1)]

    def test_cart_is_cleared_and_invoice_listed(self):
        service, carts, ledger, _ = _setup()
        _fill(carts)

        invoice = service.checkout(OWNER)

        assert carts.get(OWNER) == []
        assert [inv.id for inv in ledger.list_by_owner(OWNER)] == [invoice.id]

    def test_cart_is_emptied_not_deleted(self):
        service, carts, _, _ = _setup()
        _fill(carts)

        service.checkout(OWNER)

        lookup = carts.find(OWNER)
        assert isinstance(lookup, Found)
        assert lookup.cart.is_empty

    def test_completion_is_logged(self):
        service, carts, _, _ = _setup()
        _fill(carts)

        with capture_logs() as logs:
            invoice = service.checkout(OWNER)

        completed = [e for e in logs if e["event"] == "checkout_completed"]
        assert completed == [
            {
                "event": "checkout_completed",
                "log_level": "info",
                "owner_id": OWNER,
                "invoice_id": invoice.id,
                "total": "25",
                "items": 2,
            }
        ]


class TestCheckoutEmptinessGuard:

    def test_owner_without_cart_rejected(self):
        service, _, ledger, store = _setup()

        with pytest.raises(EmptyCartError) as exc_info:
            service.checkout(OWNER)

        assert exc_info.value.owner_id == OWNER
        assert ledger.list_by_owner(OWNER) == []
        assert store.raw("carts") == []

    def test_emptied_cart_rejected(self):
        service, carts, ledger, _ = _setup()
        carts.add_item(OWNER, make_product("1"))
        carts.clear(OWNER)

        with pytest.raises(EmptyCartError):
            service.checkout(OWNER)

        assert ledger.list_by_owner(OWNER) == []

    def test_second_checkout_rejected(self):
        service, carts, ledger, _ = _setup()
        _fill(carts)
        service.checkout(OWNER)

        with pytest.raises(EmptyCartError):
            service.checkout(OWNER)

        assert len(ledger.list_by_owner(OWNER)) == 1


class TestCheckoutInterruptedClear:

    def test_failed_clear_propagates_and_keeps_invoice(self):
        store = FailingReplaceStore("carts")
        service, carts, ledger, _ = _setup(store)
        _fill(carts)

        store.armed = True
        with pytest.raises(OSError, match="disk full"):
            service.checkout(OWNER)

        assert len(ledger.list_by_owner(OWNER)) == 1
        assert len(carts.get(OWNER)) == 2

    def test_retry_finishes_clear_without_second_invoice(self):
        store = FailingReplaceStore("carts")
        service, carts, ledger, _ = _setup(store)
        _fill(carts)

        store.armed = True
        with pytest.raises(OSError):
            service.checkout(OWNER)
        store.armed = False

        with capture_logs() as logs:
            invoice = service.checkout(OWNER)

        invoices = ledger.list_by_owner(OWNER)
        assert [inv.id for inv in invoices] == [invoice.id]
        assert carts.get(OWNER) == []
        assert any(e["event"] == "checkout_resumed" for e in logs)

    def test_cart_changed_after_interruption_is_billed_again(self):
        store = FailingReplaceStore("carts")
        service, carts, ledger, _ = _setup(store)
        _fill(carts)

        store.armed = True
        with pytest.raises(OSError):
            service.checkout(OWNER)
        store.armed = False

        # The shopper edits the stale cart; that is a new purchase.
        carts.set_quantity(OWNER, "2", 3)
        service.checkout(OWNER)

        totals = [inv.total for inv in ledger.list_by_owner(OWNER)]
        assert totals == [Money.of("25"), Money.of("35")]

    def test_rebuilt_carts_collection_is_not_mistaken_for_a_resume(self):
        service, carts, ledger, store = _setup()
        carts.add_item(OWNER, make_product("1", "Widget", "10"))
        first = service.checkout(OWNER)

        # Operator resets the carts document; revisions start over.
        store.replace_all("carts", [])
        carts.add_item(OWNER, make_product("2", "Gadget", "5"))
        second = service.checkout(OWNER)

        invoices = ledger.list_by_owner(OWNER)
        assert second.id != first.id
        assert [inv.id for inv in invoices] == [first.id, second.id]
        assert [i.product_id for i in second.items] == ["2"]
        assert carts.get(OWNER) == []
