"""Domain service: catalog search and filtering.

The storefront narrows the catalog by free-text query, brand, category,
gender and price band. All criteria combine with AND; an unset criterion
matches everything.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, ProductType

DEFAULT_MIN_PRICE = Decimal("0")
DEFAULT_MAX_PRICE = Decimal("9999")


@dataclass(frozen=True)
class ProductFilter:
    query: str | None = None
    brands: tuple[str, ...] = ()
    category: str | None = None
    gender: str | None = None
    min_price: Decimal = DEFAULT_MIN_PRICE
    max_price: Decimal = DEFAULT_MAX_PRICE

    def __post_init__(self) -> None:
        if self.min_price > self.max_price:
            raise ValidationError(
                f"Minimum price {self.min_price} exceeds maximum {self.max_price}"
            )
        if self.category:
            # Fail on unknown categories rather than silently matching nothing.
            ProductType.from_slug(self.category)

    @property
    def is_active(self) -> bool:
        return bool(
            self.query
            or self.brands
            or self.category
            or self.gender
            or self.min_price != DEFAULT_MIN_PRICE
            or self.max_price != DEFAULT_MAX_PRICE
        )

    def matches(self, product: Product) -> bool:
        if self.query:
            needle = self.query.lower()
            if needle not in product.name.lower() and needle not in product.brand.lower():
                return False
        if self.brands and product.brand not in self.brands:
            return False
        if self.category and product.category != ProductType.from_slug(self.category).slug:
            return False
        if self.gender and (product.gender or "").lower() != self.gender.lower():
            return False
        return self.min_price <= product.price.amount <= self.max_price

    def apply(self, products: Iterable[Product]) -> list[Product]:
        return [p for p in products if self.matches(p)]


def available_brands(products: Iterable[Product]) -> list[str]:
    """Distinct brand names for the filter sidebar, sorted."""
    return sorted({p.brand for p in products})


def lens_options(
    products: Iterable[Product], offered: Collection[str] = ()
) -> list[Product]:
    """Lenses that can be fitted to a frame, cheapest first.

    ``offered`` restricts the choice to those lens names; empty offers
    every lens in the catalog.
    """
    wanted = {name.lower() for name in offered}
    return sorted(
        (p for p in products if p.is_lens and (not wanted or p.name.lower() in wanted)),
        key=lambda p: (p.price.amount, p.name),
    )
