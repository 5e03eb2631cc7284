"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, ProductType
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self, product_repo: ProductRepository, currency: str = DEFAULT_CURRENCY
    ) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        description: str,
        price: str,
        brand: str,
        product_type: str,
        image_id: str,
        **optional,
    ) -> Product:
        """Add a new product to the catalog.

        ``optional`` carries the non-required catalog fields (image URL,
        material, colour, gender, SKU, attributes).
        """
        if name and self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product.create(
            id=self._next_id(),
            name=name,
            description=description,
            price=Money.of(price, self._currency),
            brand=brand,
            type=ProductType.from_slug(product_type),
            image_id=image_id,
            created_at=datetime.now(timezone.utc),
            **optional,
        )
        self._product_repo.save(product)
        logger.info("Added product %s (%s)", product.id, product.name)
        return product

    def _next_id(self) -> str:
        numeric = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        return str(max(numeric) + 1) if numeric else "1"
