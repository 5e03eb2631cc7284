"""Composition root: wires concrete implementations to domain interfaces.

This is the only module that knows about every layer. Everything else
depends on the abstract repositories.
"""

from __future__ import annotations

from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.persistence.cached_product_repository import (
    CachedProductRepository,
)
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_review_repository import (
    JsonReviewRepository,
)
from storefront.infrastructure.persistence.json_user_repository import JsonUserRepository
from storefront.infrastructure.seed_data import seed_catalog


def product_repository(with_fallback: bool = True) -> ProductRepository:
    """The cached catalog.

    Shopper-facing reads pass ``with_fallback`` so an empty store shows the
    seed catalog; catalog administration works on the real store only.
    """
    settings = get_settings()
    fallback = []
    if with_fallback and settings.catalog_seed_fallback:
        fallback = seed_catalog(settings.currency)
    return CachedProductRepository(
        JsonProductRepository(settings.data_dir / "products.json"),
        revalidate_seconds=settings.catalog_revalidate_seconds,
        fallback=fallback,
    )


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().data_dir / "orders.json")


def cart_repository(products: ProductRepository | None = None) -> JsonCartRepository:
    settings = get_settings()
    return JsonCartRepository(
        settings.data_dir / "carts.json",
        products or product_repository(),
        currency=settings.currency,
    )


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(get_settings().data_dir / "users.json")


def review_repository() -> JsonReviewRepository:
    return JsonReviewRepository(get_settings().data_dir / "reviews.json")
