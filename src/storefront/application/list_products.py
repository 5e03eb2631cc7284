"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_search import ProductFilter, available_brands


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_filter: ProductFilter | None = None) -> list[ProductDTO]:
        products = self._product_repo.list_all()
        if product_filter is not None:
            products = product_filter.apply(products)
        return [ProductDTO.from_product(p) for p in products]

    def brands(self) -> list[str]:
        return available_brands(self._product_repo.list_all())
