"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from storefront.domain.model.product import Product, ProductType
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore


class JsonProductRepository(JsonDocumentStore, ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        needle = name.strip().lower()
        for raw in self._load_raw():
            if raw["name"].lower() == needle:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        self._upsert_raw("id", self._to_raw(product))

    def delete(self, product_id: str) -> bool:
        records = self._load_raw()
        kept = [raw for raw in records if raw["id"] != product_id]
        if len(kept) == len(records):
            return False
        self._persist_raw(kept)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "brand": product.brand,
            "type": product.type.value,
            "imageId": product.image_id,
            "imageUrl": product.image_url,
            "material": product.material,
            "color": product.color,
            "gender": product.gender,
            "SKU": product.sku,
            "attributes": product.attributes,
            "createdAt": product.created_at.isoformat() if product.created_at else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        created = raw.get("createdAt")
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY)),
            brand=raw.get("brand", ""),
            type=ProductType(raw["type"]),
            image_id=raw.get("imageId", ""),
            image_url=raw.get("imageUrl"),
            material=raw.get("material"),
            color=raw.get("color"),
            gender=raw.get("gender"),
            sku=raw.get("SKU"),
            attributes=dict(raw.get("attributes") or {}),
            created_at=datetime.fromisoformat(created) if created else None,
        )
