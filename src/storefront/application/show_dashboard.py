"""Application service: Show Dashboard use case (query).

Headline numbers for the admin landing page.
"""

from __future__ import annotations

from storefront.application.dto import DashboardDTO, OrderDTO
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class ShowDashboardHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._user_repo = user_repo
        self._currency = currency

    def handle(self, recent_limit: int = 5) -> DashboardDTO:
        orders = self._order_repo.list_all()

        return DashboardDTO(
            total_revenue=" + ".join(str(m) for m in self._revenue(orders)),
            total_sales=len(orders),
            total_products=len(self._product_repo.list_all()),
            total_users=len(self._user_repo.list_all()),
            recent_orders=[OrderDTO.from_order(o) for o in orders[:recent_limit]],
        )

    def _revenue(self, orders: list[Order]) -> list[Money]:
        """Sum of every order placed, one total per currency.

        Cancelled orders still count. The store's own currency comes first
        and is always present, even with no orders.
        """
        totals = {self._currency: Money.zero(self._currency)}
        for order in orders:
            amount = order.total_amount
            totals[amount.currency] = (
                totals.get(amount.currency, Money.zero(amount.currency)) + amount
            )
        return list(totals.values())
