"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, user_id: str | None = None) -> OrderDTO:
        """Return one order.

        When ``user_id`` is given the order must belong to that user; an
        order owned by someone else is reported as not found.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None or (user_id is not None and order.user_id != user_id):
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return OrderDTO.from_order(order)
