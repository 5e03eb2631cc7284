"""Application service: Submit Review use case."""

from __future__ import annotations

from storefront.application.dto import ReviewDTO
from storefront.application.list_reviews import to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.review import Review
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.domain.repository.user_repository import UserRepository


class SubmitReviewHandler:

    def __init__(
        self,
        review_repo: ReviewRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._review_repo = review_repo
        self._product_repo = product_repo
        self._user_repo = user_repo

    def handle(
        self,
        user_id: str,
        product_id: str,
        rating: int,
        comment: str,
        image_url: str | None = None,
    ) -> ReviewDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        review = Review.create(
            product_id=product_id,
            user_id=user.id,
            user_name=user.display_name,
            rating=rating,
            comment=comment,
            image_url=image_url,
        )
        self._review_repo.save(review)
        return to_dto(review)
