"""Abstract record store: whole-document persistence of named collections.

A collection is a flat list of JSON-compatible dicts stored as a single
document.  Repositories never write partial documents; they load the
whole collection, change it, and hand the whole collection back.

The store also owns the serialization point.  ``lock(collection)``
returns a reentrant per-collection lock that every read-modify-write
must hold from load to replace.
"""

from __future__ import annotations

import re
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from storefront.domain.exceptions import ValidationError

_COLLECTION_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


def check_collection_name(collection: str) -> str:
    if not _COLLECTION_NAME.match(collection):
        raise ValidationError(f"Invalid collection name: {collection!r}")
    return collection


class RecordStore(ABC):

    def __init__(self) -> None:
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    @abstractmethod
    def ensure(self, collection: str) -> None:
        """Create an empty collection if none exists.  Idempotent."""

    @abstractmethod
    def load_all(self, collection: str) -> list[dict]:
        """Return every record, or raise StoreCorruptError."""

    @abstractmethod
    def replace_all(self, collection: str, documents: list[dict]) -> None:
        """Atomically overwrite the whole collection."""

    @contextmanager
    def lock(self, collection: str) -> Iterator[None]:
        with self._locks_guard:
            mutex = self._locks.setdefault(collection, threading.RLock())
        with mutex:
            yield
