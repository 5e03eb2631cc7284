"""Application service: Add To Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Prescription
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(
        self,
        user_id: str,
        product_id: str,
        quantity: int = 1,
        lens_id: str | None = None,
        prescription: Prescription | None = None,
    ) -> CartDTO:
        """Add a product (and optional lens) to the user's cart.

        Adding a product/lens pair that is already in the cart increases
        that line's quantity instead of creating a second line.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        lens = None
        if lens_id is not None:
            lens = self._product_repo.get_by_id(lens_id)
            if lens is None:
                raise EntityNotFoundError(f"Lens with ID '{lens_id}' not found")

        cart = self._cart_repo.get_for_user(user_id)
        cart.add_item(product, quantity, lens=lens, prescription=prescription)
        self._cart_repo.save(cart)
        return CartDTO.from_cart(cart)
