"""Invoice — the immutable record of a completed checkout.

The total is never stored as a trusted value: it is always recomputed
from the line items.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import EmptyPurchaseError
from storefront.domain.model.cart import LineItem, total_of
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Invoice:
    """Use ``Invoice.create()`` for new invoices; ``__init__`` is left
    plain so the ledger can reconstitute persisted ones."""

    id: str
    owner_id: str
    items: tuple[LineItem, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    cart_revision: int | None = None

    @staticmethod
    def create(
        invoice_id: str,
        owner_id: str,
        items: list[LineItem] | tuple[LineItem, ...],
        cart_revision: int | None = None,
    ) -> Invoice:
        if not items:
            raise EmptyPurchaseError(owner_id)
        return Invoice(
            id=invoice_id,
            owner_id=owner_id,
            items=tuple(items),
            cart_revision=cart_revision,
        )

    @property
    def total(self) -> Money:
        return total_of(self.items)
