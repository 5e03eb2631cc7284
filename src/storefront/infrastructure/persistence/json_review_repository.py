"""JSON-file-backed implementation of ReviewRepository."""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.review import Review
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore


class JsonReviewRepository(JsonDocumentStore, ReviewRepository):

    def next_id(self) -> int:
        return self._next_int_id()

    def list_for_product(self, product_id: str) -> list[Review]:
        reviews = [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["productId"] == product_id
        ]
        return sorted(reviews, key=lambda r: (r.created_at, r.id), reverse=True)

    def save(self, review: Review) -> None:
        if review.id is None:
            review.id = self.next_id()
        self._upsert_raw("id", self._to_raw(review))

    @staticmethod
    def _to_raw(review: Review) -> dict:
        return {
            "id": review.id,
            "productId": review.product_id,
            "userId": review.user_id,
            "userName": review.user_name,
            "userImage": review.user_image,
            "rating": review.rating,
            "comment": review.comment,
            "imageUrl": review.image_url,
            "createdAt": review.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Review:
        return Review(
            id=raw["id"],
            product_id=raw["productId"],
            user_id=raw["userId"],
            user_name=raw["userName"],
            rating=raw["rating"],
            comment=raw["comment"],
            image_url=raw.get("imageUrl"),
            user_image=raw.get("userImage"),
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )
