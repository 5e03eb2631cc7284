"""JSON-file-backed implementation of CartRepository.

Only references are stored (product id, lens id, quantity, prescription).
Products are resolved through the product repository on every load, so a
cart always shows current catalog prices until checkout freezes them.
Lines whose product has gone, or is no longer priced in the store's
currency, are dropped on load.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path

from storefront.domain.model.cart import Cart, CartItem, Prescription
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore

logger = logging.getLogger(__name__)


class JsonCartRepository(JsonDocumentStore, CartRepository):

    def __init__(
        self,
        file_path: Path,
        product_repo: ProductRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        super().__init__(file_path)
        self._product_repo = product_repo
        self._currency = currency

    def get_for_user(self, user_id: str) -> Cart:
        for raw in self._load_raw():
            if raw["userId"] == user_id:
                return self._to_domain(raw)
        return Cart(user_id=user_id, currency=self._currency)

    def save(self, cart: Cart) -> None:
        self._upsert_raw("userId", self._to_raw(cart))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "userId": cart.user_id,
            "items": [
                {
                    "productId": item.product.id,
                    "lensId": item.lens.id if item.lens else None,
                    "quantity": item.quantity.value,
                    "prescription": asdict(item.prescription) if item.prescription else None,
                }
                for item in cart.items
            ],
        }

    def _to_domain(self, raw: dict) -> Cart:
        cart = Cart(user_id=raw["userId"], currency=self._currency)
        for line in raw["items"]:
            product = self._product_repo.get_by_id(line["productId"])
            lens_id = line.get("lensId")
            lens = self._product_repo.get_by_id(lens_id) if lens_id else None
            if product is None or (lens_id and lens is None):
                logger.warning(
                    "Dropping cart line %s/%s for user %s: product no longer exists",
                    line["productId"],
                    lens_id,
                    raw["userId"],
                )
                continue
            if not cart.accepts(product) or (lens and not cart.accepts(lens)):
                logger.warning(
                    "Dropping cart line %s/%s for user %s: not priced in %s",
                    line["productId"],
                    lens_id,
                    raw["userId"],
                    self._currency,
                )
                continue
            prescription = line.get("prescription")
            cart.items.append(
                CartItem(
                    product=product,
                    quantity=Quantity(line["quantity"]),
                    lens=lens,
                    prescription=Prescription(**prescription) if prescription else None,
                )
            )
        return cart
