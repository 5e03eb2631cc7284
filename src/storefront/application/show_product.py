"""Application service: Show Product use case (query).

Bundles what a product page needs: the product, its rating summary and,
for frames, the lenses that can be fitted to it.
"""

from __future__ import annotations

from collections.abc import Collection

from storefront.application.dto import ProductDetailDTO, ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import ProductType
from storefront.domain.model.review import RatingSummary
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.domain.service.catalog_search import lens_options

# Product types sold with an optional add-on lens.
LENS_COMPATIBLE = (ProductType.FRAMES, ProductType.SUNGLASSES)


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
        offered_lenses: Collection[str] = (),
    ) -> None:
        self._product_repo = product_repo
        self._review_repo = review_repo
        self._offered_lenses = offered_lenses

    def handle(self, product_id: str) -> ProductDetailDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        summary = RatingSummary.of(self._review_repo.list_for_product(product_id))
        lenses = []
        if product.type in LENS_COMPATIBLE:
            lenses = lens_options(self._product_repo.list_all(), self._offered_lenses)

        return ProductDetailDTO(
            product=ProductDTO.from_product(product),
            review_count=summary.count,
            average_rating=str(summary.average) if summary.average is not None else None,
            lens_options=[ProductDTO.from_product(p) for p in lenses],
        )
