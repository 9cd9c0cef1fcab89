"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

- ``STOREFRONT_DATA_DIR``: where collection documents live
  (default: ``<project root>/data``)
- ``STOREFRONT_LOG_LEVEL``: minimum log level (default: ``WARNING``)
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from storefront.infrastructure.persistence.json_record_store import JsonRecordStore
from storefront.infrastructure.persistence.store_cart_repository import (
    StoreCartRepository,
)
from storefront.infrastructure.persistence.store_invoice_ledger import (
    StoreInvoiceLedger,
)
from storefront.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
_DEFAULT_LOG_LEVEL = "WARNING"


def data_dir() -> Path:
    override = os.environ.get("STOREFRONT_DATA_DIR")
    return Path(override).expanduser() if override else _DEFAULT_DATA_DIR


def log_level() -> str:
    return os.environ.get("STOREFRONT_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


@lru_cache(maxsize=None)
def _store_for(directory: Path) -> JsonRecordStore:
    # One store per directory so every repository shares its locks.
    return JsonRecordStore(directory)


def record_store() -> JsonRecordStore:
    return _store_for(data_dir().resolve())


def cart_repository() -> StoreCartRepository:
    return StoreCartRepository(record_store())


def invoice_ledger() -> StoreInvoiceLedger:
    return StoreInvoiceLedger(record_store())


def product_repository() -> StoreProductRepository:
    return StoreProductRepository(record_store())
