"""Abstract repository for the Review aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.review import Review


class ReviewRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique review ID."""

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[Review]:
        """Return a product's reviews, newest first."""

    @abstractmethod
    def save(self, review: Review) -> None:
        """Persist a review, assigning an ID if needed."""
