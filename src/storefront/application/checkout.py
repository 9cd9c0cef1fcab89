"""Application service: Checkout use case.

Delegates the compound cart -> invoice conversion to the domain
CheckoutService and maps the result to a DTO.
"""

from __future__ import annotations

from storefront.application.dto import InvoiceDTO, invoice_to_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.invoice_ledger import InvoiceLedger
from storefront.domain.service.checkout_service import CheckoutService


class CheckoutHandler:

    def __init__(self, cart_repo: CartRepository, ledger: InvoiceLedger) -> None:
        self._service = CheckoutService(cart_repo, ledger)

    def handle(self, owner_id: str) -> InvoiceDTO:
        return invoice_to_dto(self._service.checkout(owner_id))
