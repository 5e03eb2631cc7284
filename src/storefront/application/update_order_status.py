"""Application service: Update Order Status use case.

Status changes are not gated by a state machine: any of the known
statuses may be set from any other.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, status: str) -> OrderStatus:
        """Set the order's status. Returns the status it replaced."""
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.set_status(new_status)
        self._order_repo.save(order)
        logger.info(
            "Order #%s status %s -> %s", order_id, previous.value, new_status.value
        )
        return previous
