"""Data Transfer Objects: plain containers that cross layer boundaries.

Handlers return these to the CLI instead of domain objects, with money
already rendered as display strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product

DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    brand: str
    type: str
    price: str
    description: str
    gender: str | None
    image_url: str | None
    attributes: dict[str, str]

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            brand=product.brand,
            type=product.type.value,
            price=str(product.price),
            description=product.description,
            gender=product.gender,
            image_url=product.image_url,
            attributes=dict(product.attributes),
        )


@dataclass(frozen=True)
class ProductDetailDTO:
    product: ProductDTO
    review_count: int
    average_rating: str | None  # e.g. "4.5", None when unreviewed
    lens_options: list[ProductDTO]


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    lens_id: str | None
    lens_name: str | None
    quantity: int
    unit_price: str
    line_total: str
    has_prescription: bool


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    lines: list[CartLineDTO]
    total: str
    count: int

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        return CartDTO(
            user_id=cart.user_id,
            lines=[
                CartLineDTO(
                    product_id=item.product.id,
                    product_name=item.product.name,
                    lens_id=item.lens.id if item.lens else None,
                    lens_name=item.lens.name if item.lens else None,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                    has_prescription=item.prescription is not None,
                )
                for item in cart.items
            ],
            total=str(cart.total),
            count=cart.count,
        )


@dataclass(frozen=True)
class OrderItemDTO:
    product_name: str
    lens_name: str | None
    quantity: int
    price_at_purchase: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    items: list[OrderItemDTO]
    total: str
    order_date: str
    shipping_address: str | None
    payment_method: str | None

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        if order.id is None:
            raise ValueError("An order must be saved before it is displayed")
        return OrderDTO(
            id=order.id,
            user_id=order.user_id,
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_name=item.product_name,
                    lens_name=item.lens_name,
                    quantity=item.quantity.value,
                    price_at_purchase=str(item.price_at_purchase),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total_amount),
            order_date=order.order_date.strftime(DATE_FORMAT),
            shipping_address=order.shipping_address,
            payment_method=order.payment_method.value if order.payment_method else None,
        )


@dataclass(frozen=True)
class ReviewDTO:
    id: int
    user_name: str
    rating: int
    comment: str
    image_url: str | None
    created_at: str


@dataclass(frozen=True)
class DashboardDTO:
    total_revenue: str
    total_sales: int
    total_products: int
    total_users: int
    recent_orders: list[OrderDTO]
