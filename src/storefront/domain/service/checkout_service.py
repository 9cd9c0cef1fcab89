"""Domain service: Checkout.

Converts a non-empty cart into an invoice and empties the cart.  The
whole run happens under the carts write lock, so two checkouts for the
same owner are serialized and the second one finds an empty cart.

The invoice is appended (durably) before the cart is cleared.  If the
process dies between the two writes, the cart still carries the revision
and the items stamped on the last invoice; the next checkout recognises
that, finishes the clear and hands back the existing invoice instead of
billing twice.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EmptyCartError
from storefront.domain.model.cart import Absent, Cart
from storefront.domain.model.invoice import Invoice
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.invoice_ledger import InvoiceLedger

log = structlog.get_logger(__name__)


class CheckoutService:

    def __init__(self, cart_repo: CartRepository, ledger: InvoiceLedger) -> None:
        self._cart_repo = cart_repo
        self._ledger = ledger

    def checkout(self, owner_id: str) -> Invoice:
        with self._cart_repo.exclusive():
            lookup = self._cart_repo.find(owner_id)
            if isinstance(lookup, Absent) or lookup.cart.is_empty:
                raise EmptyCartError(owner_id)
            cart = lookup.cart

            previous = self._ledger.list_by_owner(owner_id)
            if previous and _same_purchase(previous[-1], cart):
                invoice = previous[-1]
                log.warning(
                    "checkout_resumed",
                    owner_id=owner_id,
                    invoice_id=invoice.id,
                    cart_revision=cart.revision,
                )
                self._cart_repo.clear(owner_id)
                return invoice

            invoice = self._ledger.append(owner_id, list(cart.items), cart_revision=cart.revision)
            self._cart_repo.clear(owner_id)

        log.info(
            "checkout_completed",
            owner_id=owner_id,
            invoice_id=invoice.id,
            total=str(invoice.total.amount),
            items=len(invoice.items),
        )
        return invoice


def _same_purchase(invoice: Invoice, cart: Cart) -> bool:
    # A rebuilt carts collection restarts revisions, so the items must match too.
    return invoice.cart_revision == cart.revision and invoice.items == tuple(cart.items)
