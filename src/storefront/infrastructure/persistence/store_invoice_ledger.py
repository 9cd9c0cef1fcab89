"""Append-only InvoiceLedger on top of a RecordStore."""

from __future__ import annotations

import time
from datetime import datetime

import structlog

from storefront.domain.model.cart import LineItem
from storefront.domain.model.invoice import Invoice
from storefront.domain.repository.invoice_ledger import InvoiceLedger
from storefront.domain.repository.record_store import RecordStore
from storefront.infrastructure.persistence.records import (
    line_item_to_domain,
    line_item_to_raw,
    map_records,
)

INVOICES = "invoices"

log = structlog.get_logger(__name__)


class StoreInvoiceLedger(InvoiceLedger):

    def __init__(self, store: RecordStore, collection: str = INVOICES) -> None:
        self._store = store
        self._collection = collection
        self._store.ensure(collection)

    # --- InvoiceLedger interface ----------------------------------------------

    def append(
        self,
        owner_id: str,
        items: list[LineItem],
        cart_revision: int | None = None,
    ) -> Invoice:
        with self._store.lock(self._collection):
            records = self._store.load_all(self._collection)
            invoice = Invoice.create(
                invoice_id=self._next_id(records),
                owner_id=owner_id,
                items=items,
                cart_revision=cart_revision,
            )
            records.append(self._to_raw(invoice))
            self._store.replace_all(self._collection, records)

        log.info(
            "invoice_appended",
            owner_id=owner_id,
            invoice_id=invoice.id,
            total=str(invoice.total.amount),
        )
        return invoice

    def list_by_owner(self, owner_id: str) -> list[Invoice]:
        records = [
            raw for raw in self._store.load_all(self._collection)
            if raw.get("owner_id") == owner_id
        ]
        return map_records(self._collection, records, self._to_domain)

    # --- Id generation --------------------------------------------------------

    @staticmethod
    def _next_id(records: list[dict]) -> str:
        """Milliseconds since the epoch, bumped past any id already taken."""
        taken = {str(raw.get("id")) for raw in records}
        candidate = time.time_ns() // 1_000_000
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(invoice: Invoice) -> dict:
        return {
            "id": invoice.id,
            "owner_id": invoice.owner_id,
            "items": [line_item_to_raw(item) for item in invoice.items],
            "total": str(invoice.total.amount),
            "created_at": invoice.created_at.isoformat(),
            "cart_revision": invoice.cart_revision,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Invoice:
        # "total" is informational only; Invoice.total recomputes it.
        return Invoice(
            id=str(raw["id"]),
            owner_id=raw["owner_id"],
            items=tuple(line_item_to_domain(i) for i in raw["items"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            cart_revision=raw.get("cart_revision"),
        )
