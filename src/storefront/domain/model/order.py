"""Order aggregate.

An order is the frozen snapshot of a cart at checkout: product names,
lens names and prices are copied onto each item so later catalog edits
never change what the customer paid. Only ``status`` moves afterwards,
and any writer may set any status value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, raw: str) -> OrderStatus:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Unknown order status '{raw}' (expected one of: {allowed})"
            ) from None


class PaymentMethod(Enum):
    CARD = "card"
    UPI = "upi"
    COD = "cod"


@dataclass(frozen=True)
class ShippingAddress:
    address: str
    city: str
    zip_code: str
    country: str

    def __post_init__(self) -> None:
        for label, value in (
            ("Address", self.address),
            ("City", self.city),
            ("Country", self.country),
        ):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")
        if not self.zip_code or len(self.zip_code.strip()) < 5:
            raise ValidationError("A valid ZIP code is required")

    def __str__(self) -> str:
        return f"{self.address}, {self.city}, {self.zip_code}, {self.country}"


@dataclass(frozen=True)
class OrderItem:
    """One purchased line, priced as frame plus lens at checkout time."""

    product_id: str
    product_name: str
    quantity: Quantity
    price_at_purchase: Money
    lens_name: str | None = None

    @property
    def line_total(self) -> Money:
        return self.price_at_purchase * self.quantity.value


@dataclass
class Order:
    """Aggregate root for a placed order.

    Use ``Order.create()`` for new orders. The plain constructor is left
    permissive so repositories can rehydrate stored orders as-is.
    """

    id: int | None
    user_id: str
    items: list[OrderItem]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    shipping_address: str | None = None
    billing_address: str | None = None
    payment_method: PaymentMethod | None = None

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderItem],
        shipping_address: ShippingAddress,
        payment_method: PaymentMethod,
        billing_address: ShippingAddress | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> Order:
        if not user_id:
            raise ValidationError("Orders must belong to a user")
        if not items:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero(currency)
        for item in items:
            total = total + item.line_total

        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            total_amount=total,
            shipping_address=str(shipping_address),
            billing_address=str(billing_address or shipping_address),
            payment_method=payment_method,
        )

    def set_status(self, status: OrderStatus) -> OrderStatus:
        """Assign a new status and return the previous one."""
        previous = self.status
        self.status = status
        return previous

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
