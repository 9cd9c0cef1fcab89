"""Catalog ProductRepository on top of a RecordStore."""

from __future__ import annotations

from decimal import Decimal

import structlog

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.record_store import RecordStore
from storefront.infrastructure.persistence.records import map_records

log = structlog.get_logger(__name__)

PRODUCTS = "products"


class StoreProductRepository(ProductRepository):

    def __init__(self, store: RecordStore, collection: str = PRODUCTS) -> None:
        self._store = store
        self._collection = collection
        self._store.ensure(collection)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return map_records(
            self._collection, self._store.load_all(self._collection), self._to_domain
        )

    def save(self, product: Product) -> None:
        with self._store.lock(self._collection):
            records = self._store.load_all(self._collection)
            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(records):
                if str(raw.get("id")) == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                records.append(self._to_raw(product))
            self._store.replace_all(self._collection, records)

    def add(self, name: str, unit_price: Money, image_ref: str = "") -> Product:
        with self._store.lock(self._collection):
            records = self._store.load_all(self._collection)
            next_id = str(
                max((int(r["id"]) for r in records if str(r.get("id", "")).isdigit()), default=0)
                + 1
            )
            product = Product.create(next_id, name, unit_price, image_ref)
            records.append(self._to_raw(product))
            self._store.replace_all(self._collection, records)
        log.info("product_added", product_id=product.id, name=product.name)
        return product

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "unit_price": str(product.unit_price.amount),
            "image_ref": product.image_ref,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=str(raw["id"]),
            name=raw["name"],
            unit_price=Money(Decimal(str(raw["unit_price"]))),
            image_ref=raw.get("image_ref", ""),
        )
