"""Review aggregate and the rating summary shown on product pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from storefront.domain.exceptions import ValidationError

MIN_RATING = 1
MAX_RATING = 5
MIN_COMMENT_LENGTH = 10


@dataclass
class Review:
    id: int | None
    product_id: str
    user_id: str
    user_name: str
    rating: int
    comment: str
    image_url: str | None = None
    user_image: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        product_id: str,
        user_id: str,
        user_name: str,
        rating: int,
        comment: str,
        image_url: str | None = None,
        user_image: str | None = None,
    ) -> Review:
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValidationError("Rating must be a whole number")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )
        comment = (comment or "").strip()
        if len(comment) < MIN_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment must be at least {MIN_COMMENT_LENGTH} characters long"
            )
        return Review(
            id=None,
            product_id=product_id,
            user_id=user_id,
            user_name=user_name or "Anonymous",
            rating=rating,
            comment=comment,
            image_url=image_url or None,
            user_image=user_image or None,
        )


@dataclass(frozen=True)
class RatingSummary:
    count: int
    average: Decimal | None

    @staticmethod
    def of(reviews: list[Review]) -> RatingSummary:
        if not reviews:
            return RatingSummary(count=0, average=None)
        mean = Decimal(sum(r.rating for r in reviews)) / Decimal(len(reviews))
        return RatingSummary(
            count=len(reviews),
            average=mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP),
        )
