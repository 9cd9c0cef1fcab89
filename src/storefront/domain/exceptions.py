"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
Each exception keeps its context (owner, collection, product) as
attributes for logging.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreCorruptError(DomainException):
    """A persisted collection exists but cannot be parsed."""

    def __init__(self, collection: str, reason: str) -> None:
        super().__init__(f"Stored collection '{collection}' is corrupt: {reason}")
        self.collection = collection
        self.reason = reason


class CartNotFoundError(EntityNotFoundError):

    def __init__(self, owner_id: str) -> None:
        super().__init__(f"No cart found for '{owner_id}'")
        self.owner_id = owner_id


class ItemNotFoundError(EntityNotFoundError):

    def __init__(self, owner_id: str, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' is not in the cart of '{owner_id}'")
        self.owner_id = owner_id
        self.product_id = product_id


class EmptyCartError(ValidationError):
    """Checkout was attempted on a missing or empty cart."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(f"The cart of '{owner_id}' is empty")
        self.owner_id = owner_id


class EmptyPurchaseError(ValidationError):
    """An invoice was requested with zero line items."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(f"Cannot invoice '{owner_id}' for an empty purchase")
        self.owner_id = owner_id
