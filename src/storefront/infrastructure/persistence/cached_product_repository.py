"""Read-through cache in front of a ProductRepository.

The storefront reads the catalog far more often than it writes it. Reads
are served from an in-process snapshot until it is older than the
revalidation window; any write through this wrapper drops the snapshot.
Writes made by another process are only seen once the window expires.

An optional fallback catalog is served in place of an empty or
unreadable store, so shoppers still see products before the real
catalog is loaded.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CachedProductRepository(ProductRepository):

    def __init__(
        self,
        inner: ProductRepository,
        revalidate_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        fallback: Iterable[Product] = (),
    ) -> None:
        self._inner = inner
        self._revalidate_seconds = revalidate_seconds
        self._clock = clock
        self._fallback = {p.id: p for p in fallback}
        self._snapshot: dict[str, Product] | None = None
        self._loaded_at = 0.0

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._products().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        needle = name.strip().lower()
        for product in self._products().values():
            if product.name.lower() == needle:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._products().values())

    def save(self, product: Product) -> None:
        self._inner.save(product)
        self.invalidate()

    def delete(self, product_id: str) -> bool:
        deleted = self._inner.delete(product_id)
        self.invalidate()
        return deleted

    # --- Cache control --------------------------------------------------------

    def invalidate(self) -> None:
        if self._snapshot is not None:
            logger.debug("Catalog cache invalidated")
        self._snapshot = None

    def _products(self) -> dict[str, Product]:
        now = self._clock()
        if self._snapshot is not None and now - self._loaded_at < self._revalidate_seconds:
            logger.debug("Catalog cache hit")
            return self._snapshot
        logger.debug("Catalog cache miss, reloading from store")
        products = self._load()
        # A zero window never keeps a snapshot.
        if self._revalidate_seconds > 0:
            self._snapshot = products
            self._loaded_at = now
        return products

    def _load(self) -> dict[str, Product]:
        try:
            products = self._inner.list_all()
        except (OSError, ValueError) as exc:
            if not self._fallback:
                raise
            logger.warning("Catalog store unreadable (%s), serving fallback catalog", exc)
            return dict(self._fallback)
        if not products and self._fallback:
            logger.warning("Catalog store is empty, serving fallback catalog")
            return dict(self._fallback)
        return {p.id: p for p in products}
