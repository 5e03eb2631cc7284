"""Application service: Seed Catalog use case.

Loads a static starter catalog, but only into an empty store so a live
catalog is never overwritten.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from storefront.application.add_product import AddProductHandler
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SeedCatalogHandler:

    def __init__(self, product_repo: ProductRepository, currency: str) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(self, seed: Iterable[Mapping[str, Any]]) -> int:
        """Insert the seed products; returns how many were inserted."""
        if self._product_repo.list_all():
            logger.info("Catalog already populated, skipping seed")
            return 0

        adder = AddProductHandler(self._product_repo, self._currency)
        inserted = 0
        for record in seed:
            fields = dict(record)
            adder.handle(
                name=fields.pop("name"),
                description=fields.pop("description"),
                price=fields.pop("price"),
                brand=fields.pop("brand"),
                product_type=fields.pop("type"),
                image_id=fields.pop("image_id"),
                **fields,
            )
            inserted += 1
        logger.info("Seeded catalog with %d products", inserted)
        return inserted
