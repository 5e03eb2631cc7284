"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str | None = None) -> list[OrderDTO]:
        """One user's order history, or every order when no user is given.

        Newest orders come first either way.
        """
        if user_id is None:
            orders = self._order_repo.list_all()
        else:
            orders = self._order_repo.list_for_user(user_id)
        return [OrderDTO.from_order(o) for o in orders]
