"""Application service: Update Cart Quantity use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.domain.repository.cart_repository import CartRepository


class UpdateCartQuantityHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(
        self,
        user_id: str,
        product_id: str,
        quantity: int,
        lens_id: str | None = None,
    ) -> tuple[bool, CartDTO]:
        """Set a line's quantity. Zero or below removes the line.

        Updating a line that is not in the cart changes nothing. Returns
        whether a line was changed, and the resulting cart.
        """
        cart = self._cart_repo.get_for_user(user_id)
        changed = cart.update_quantity(product_id, quantity, lens_id)
        if changed:
            self._cart_repo.save(cart)
        return changed, CartDTO.from_cart(cart)
