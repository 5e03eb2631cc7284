"""Product aggregate.

A product is any sellable catalog entry: frames, sunglasses, contact
lenses, or an optical lens sold as an add-on to a frame. Subtype details
(frame shape, lens colour, coatings...) live in ``attributes`` rather than
in separate classes; the type tag decides how the cart treats a product.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class ProductType(Enum):
    FRAMES = "Frames"
    LENSES = "Lenses"
    SUNGLASSES = "Sunglasses"
    CONTACT_LENSES = "Contact Lenses"

    @property
    def slug(self) -> str:
        return self.value.lower().replace(" ", "-")

    @classmethod
    def from_slug(cls, raw: str) -> ProductType:
        """Accept either the display value or its dashed slug."""
        needle = raw.strip().lower().replace(" ", "-")
        for member in cls:
            if member.slug == needle:
                return member
        raise ValidationError(f"Unknown product type: '{raw}'")


# Fields an admin edit may overwrite. ``id`` and ``created_at`` are fixed.
EDITABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "price",
        "brand",
        "type",
        "image_id",
        "image_url",
        "material",
        "color",
        "gender",
        "sku",
        "attributes",
    }
)


@dataclass
class Product:
    """A catalog entry. Prices are mutable; orders keep their own snapshot."""

    id: str
    name: str
    description: str
    price: Money
    brand: str
    type: ProductType
    image_id: str = ""
    image_url: str | None = None
    material: str | None = None
    color: str | None = None
    gender: str | None = None
    sku: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    created_at: datetime | None = None

    @staticmethod
    def create(
        id: str,
        name: str,
        description: str,
        price: Money,
        brand: str,
        type: ProductType,
        image_id: str,
        **optional,
    ) -> Product:
        """Build a new product, applying the catalog form rules."""
        product = Product(
            id=id,
            name=(name or "").strip(),
            description=(description or "").strip(),
            price=price,
            brand=(brand or "").strip(),
            type=type,
            image_id=(image_id or "").strip(),
            **optional,
        )
        product._validate()
        return product

    @property
    def is_lens(self) -> bool:
        return self.type is ProductType.LENSES

    @property
    def category(self) -> str:
        return self.type.slug

    def update_price(self, new_price: Money) -> None:
        """Change the price. Existing orders are unaffected.

        Zero is allowed, as at creation; ``Money`` already rules out
        negative amounts.
        """
        if new_price.currency != self.price.currency:
            raise ValidationError(
                f"Product is priced in {self.price.currency}, not {new_price.currency}"
            )
        self.price = new_price

    def update_details(self, **changes) -> None:
        """Merge the given fields into the product.

        Fields not passed keep their current value. The merged product is
        validated before anything is assigned, so a rejected edit leaves
        the product untouched.
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot edit product field(s): {', '.join(sorted(unknown))}"
            )
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(changes)
        candidate = Product(**current)
        candidate._validate()
        for name in changes:
            setattr(self, name, getattr(candidate, name))

    def _validate(self) -> None:
        if not self.name:
            raise ValidationError("Product name is required")
        if not self.description:
            raise ValidationError("Description is required")
        if not self.brand:
            raise ValidationError("Brand is required")
        if not self.image_id:
            raise ValidationError("Image ID is required")
        if not isinstance(self.type, ProductType):
            raise ValidationError("Product type is required")
