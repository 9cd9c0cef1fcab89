"""Application service: Show Invoices use case (purchase history query)."""

from __future__ import annotations

from storefront.application.dto import InvoiceDTO, invoice_to_dto
from storefront.domain.repository.invoice_ledger import InvoiceLedger


class ShowInvoicesHandler:

    def __init__(self, ledger: InvoiceLedger) -> None:
        self._ledger = ledger

    def handle(self, owner_id: str) -> list[InvoiceDTO]:
        return [invoice_to_dto(inv) for inv in self._ledger.list_by_owner(owner_id)]
