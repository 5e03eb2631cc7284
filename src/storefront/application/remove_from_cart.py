"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.domain.repository.cart_repository import CartRepository


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(
        self, user_id: str, product_id: str, lens_id: str | None = None
    ) -> tuple[bool, CartDTO]:
        """Remove one line. Removing a line that is not there is a no-op.

        Returns whether a line was removed, and the resulting cart.
        """
        cart = self._cart_repo.get_for_user(user_id)
        removed = cart.remove_item(product_id, lens_id)
        if removed:
            self._cart_repo.save(cart)
        return removed, CartDTO.from_cart(cart)
