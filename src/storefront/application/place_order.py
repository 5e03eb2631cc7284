"""Application service: Place Order use case (checkout).

Loads the user and their cart, lets the checkout domain service build the
order snapshot, then persists the order before the emptied cart.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import PaymentMethod, ShippingAddress
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.checkout_service import CheckoutService

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._user_repo = user_repo

    def handle(
        self,
        user_id: str,
        shipping: ShippingAddress,
        payment_method: str,
        billing: ShippingAddress | None = None,
    ) -> OrderDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")

        try:
            method = PaymentMethod(payment_method.strip().lower())
        except ValueError:
            raise ValidationError(
                f"Unknown payment method '{payment_method}'"
            ) from None

        cart = self._cart_repo.get_for_user(user.id)
        order = CheckoutService().place_order(
            user, cart, shipping, method, billing=billing
        )

        self._order_repo.save(order)
        self._cart_repo.save(cart)
        logger.info(
            "Order #%s placed by %s: %d unit(s), total %s",
            order.id,
            user.id,
            order.item_count,
            order.total_amount,
        )
        return OrderDTO.from_order(order)
