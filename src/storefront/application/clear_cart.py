"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.domain.repository.cart_repository import CartRepository


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> int:
        """Empty the cart. Returns the number of units that were in it."""
        cart = self._cart_repo.get_for_user(user_id)
        count = cart.count
        cart.clear()
        self._cart_repo.save(cart)
        return count
