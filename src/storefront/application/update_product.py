"""Application service: Update Product use case.

An admin edit is a merge: only the fields supplied change. Orders placed
earlier keep the price they captured at checkout.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product, ProductType
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        **changes,
    ) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        changes = {k: v for k, v in changes.items() if v is not None}
        if new_price is None and not changes:
            raise ValidationError("Nothing to update")

        if "type" in changes and not isinstance(changes["type"], ProductType):
            changes["type"] = ProductType.from_slug(changes["type"])
        for key in ("name", "description", "brand", "image_id"):
            if key in changes:
                changes[key] = changes[key].strip()

        if changes:
            product.update_details(**changes)
        if new_price is not None:
            product.update_price(Money.of(new_price, product.price.currency))

        self._product_repo.save(product)
        return product
