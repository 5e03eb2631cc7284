"""Unit tests for the User and Review aggregates."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.review import RatingSummary, Review
from storefront.domain.model.user import User


class TestUser:

    def test_email_is_normalised(self):
        user = User.create("u1", "  Alice@Example.COM ")
        assert user.email == "alice@example.com"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            User.create("u1", "alice-at-example")

    def test_display_name_prefers_full_name(self):
        assert User.create("u1", "a@b.co", first_name="Alice", last_name="Rao").display_name == "Alice Rao"
        assert User.create("u1", "a@b.co", first_name=" ").display_name == "a@b.co"

    def test_grant_admin_only_once(self):
        user = User.create("u1", "a@b.co")
        assert user.grant_admin() is True
        assert user.grant_admin() is False
        assert user.is_admin


def _review(rating: int = 4, comment: str = "Great frames, very light.") -> Review:
    return Review.create("1", "u1", "Alice", rating, comment)


class TestReview:

    def test_valid_review(self):
        review = _review()
        assert review.id is None
        assert review.comment == "Great frames, very light."

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError, match="between 1 and 5"):
            _review(rating=rating)

    def test_short_comment_rejected(self):
        with pytest.raises(ValidationError, match="at least 10 characters"):
            _review(comment="   nice     ")

    def test_rating_summary(self):
        summary = RatingSummary.of([_review(5), _review(4), _review(4)])
        assert summary.count == 3
        assert summary.average == Decimal("4.3")

    def test_rating_summary_empty(self):
        assert RatingSummary.of([]) == RatingSummary(count=0, average=None)
