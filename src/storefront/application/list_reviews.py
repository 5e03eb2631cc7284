"""Application service: List Reviews use case (query)."""

from __future__ import annotations

from storefront.application.dto import DATE_FORMAT, ReviewDTO
from storefront.domain.model.review import Review
from storefront.domain.repository.review_repository import ReviewRepository


class ListReviewsHandler:

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    def handle(self, product_id: str) -> list[ReviewDTO]:
        return [to_dto(r) for r in self._review_repo.list_for_product(product_id)]


def to_dto(review: Review) -> ReviewDTO:
    if review.id is None:
        raise ValueError("A review must be saved before it is displayed")
    return ReviewDTO(
        id=review.id,
        user_name=review.user_name,
        rating=review.rating,
        comment=review.comment,
        image_url=review.image_url,
        created_at=review.created_at.strftime(DATE_FORMAT),
    )
