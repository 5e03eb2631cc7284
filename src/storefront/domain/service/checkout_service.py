"""Domain service: Checkout.

Checkout is the one operation that spans two aggregates: it reads the
cart, writes an order, then empties the cart. The snapshot is built in
full before the cart is touched, so a rejected checkout leaves the cart
exactly as it was.
"""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.order import (
    Order,
    OrderItem,
    PaymentMethod,
    ShippingAddress,
)
from storefront.domain.model.user import User


class CheckoutService:

    def place_order(
        self,
        user: User,
        cart: Cart,
        shipping: ShippingAddress,
        payment_method: PaymentMethod,
        billing: ShippingAddress | None = None,
    ) -> Order:
        """Turn the user's cart into a pending order and clear the cart.

        The returned order has no ID yet; the caller persists it.
        """
        if cart.user_id != user.id:
            raise ValidationError("Cart does not belong to this user")
        if cart.is_empty:
            raise ValidationError("Your cart is empty")

        order = Order.create(
            user_id=user.id,
            items=[self._snapshot(item) for item in cart.items],
            shipping_address=shipping,
            payment_method=payment_method,
            billing_address=billing,
            currency=cart.currency,
        )
        cart.clear()
        return order

    @staticmethod
    def _snapshot(item: CartItem) -> OrderItem:
        return OrderItem(
            product_id=item.product.id,
            product_name=item.product.name,
            quantity=item.quantity,
            price_at_purchase=item.unit_price,
            lens_name=item.lens.name if item.lens else None,
        )
