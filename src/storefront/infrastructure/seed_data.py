"""Static starter catalog.

``storefront product seed`` writes it into an empty store; until then the
catalog cache serves it read-only as a fallback.
"""

from __future__ import annotations

from storefront.domain.model.product import Product, ProductType
from storefront.domain.model.value_objects import Money

SEED_PRODUCTS: list[dict] = [
    {
        "name": "Aviator Classic",
        "description": "Thin metal aviator frame with adjustable nose pads.",
        "price": "2499.00",
        "brand": "Ray-Ban",
        "type": "Frames",
        "image_id": "frame-aviator",
        "material": "Metal",
        "color": "Gold",
        "gender": "Unisex",
        "attributes": {"frameShape": "Aviator", "size": "Medium"},
    },
    {
        "name": "Wayfarer Bold",
        "description": "Thick acetate wayfarer, a square everyday frame.",
        "price": "1999.00",
        "brand": "Ray-Ban",
        "type": "Frames",
        "image_id": "frame-wayfarer",
        "material": "Acetate",
        "color": "Black",
        "gender": "Men",
        "attributes": {"frameShape": "Square", "size": "Large"},
    },
    {
        "name": "Cat Eye Muse",
        "description": "Upswept cat eye frame in tortoise acetate.",
        "price": "2199.00",
        "brand": "Vogue Eyewear",
        "type": "Frames",
        "image_id": "frame-cateye",
        "material": "Acetate",
        "color": "Tortoise",
        "gender": "Women",
        "attributes": {"frameShape": "Cat Eye", "size": "Small"},
    },
    {
        "name": "Round Titanium",
        "description": "Featherweight round titanium frame.",
        "price": "3499.00",
        "brand": "Lindberg",
        "type": "Frames",
        "image_id": "frame-round",
        "material": "Titanium",
        "color": "Silver",
        "gender": "Unisex",
        "attributes": {"frameShape": "Round", "size": "Medium"},
    },
    {
        "name": "Coastline Polarized",
        "description": "Wraparound sport sunglasses with polarized lenses.",
        "price": "4299.00",
        "brand": "Oakley",
        "type": "Sunglasses",
        "image_id": "sun-coastline",
        "gender": "Unisex",
        "attributes": {"lensColor": "Grey", "polarization": "yes", "UVProtection": "UV400"},
    },
    {
        "name": "Daily Soft 30",
        "description": "Box of 30 daily disposable contact lenses.",
        "price": "1299.00",
        "brand": "Acuvue",
        "type": "Contact Lenses",
        "image_id": "contact-daily",
        "gender": "Unisex",
    },
    {
        "name": "ClearBlue Lenses",
        "description": "Blue light filtering single vision lenses.",
        "price": "999.00",
        "brand": "Zeiss",
        "type": "Lenses",
        "image_id": "lens-clearblue",
        "attributes": {"lensType": "Single Vision", "coatings": "Blue Cut, Anti-Glare"},
    },
    {
        "name": "Photochromic Lenses",
        "description": "Lenses that darken outdoors and clear indoors.",
        "price": "1799.00",
        "brand": "Transitions",
        "type": "Lenses",
        "image_id": "lens-photochromic",
        "attributes": {"lensType": "Single Vision", "coatings": "Photochromic"},
    },
    {
        "name": "Technoii Drive Lens",
        "description": "Anti-reflective lenses tuned for night driving.",
        "price": "1499.00",
        "brand": "Essilor",
        "type": "Lenses",
        "image_id": "lens-drive",
        "attributes": {"lensType": "Single Vision", "coatings": "Anti-Reflective"},
    },
]


def seed_catalog(currency: str) -> list[Product]:
    """The seed records as products, numbered the way seeding numbers them."""
    products = []
    for index, record in enumerate(SEED_PRODUCTS, start=1):
        fields = dict(record)
        products.append(
            Product.create(
                id=str(index),
                name=fields.pop("name"),
                description=fields.pop("description"),
                price=Money.of(fields.pop("price"), currency),
                brand=fields.pop("brand"),
                type=ProductType.from_slug(fields.pop("type")),
                image_id=fields.pop("image_id"),
                attributes=dict(fields.pop("attributes", {})),
                **fields,
            )
        )
    return products
