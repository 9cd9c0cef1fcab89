"""Abstract append-only ledger for Invoice records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import LineItem
from storefront.domain.model.invoice import Invoice


class InvoiceLedger(ABC):

    @abstractmethod
    def append(
        self,
        owner_id: str,
        items: list[LineItem],
        cart_revision: int | None = None,
    ) -> Invoice:
        """Create, persist and return a new invoice for *items*."""

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Invoice]:
        """Return the owner's invoices in creation order."""
