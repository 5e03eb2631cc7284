"""Tests for the checkout use case."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import ShippingAddress
from storefront.domain.model.value_objects import Money
from tests.fakes import (
    FakeCartRepository,
    FakeOrderRepository,
    FakeProductRepository,
    FakeUserRepository,
    make_lens,
    make_product,
    make_user,
)

SHIPPING = ShippingAddress("12 MG Road", "Bengaluru", "560001", "India")


def _setup():
    products = FakeProductRepository([
        make_product(id="1", price="2000"),
        make_lens(id="L1", price="500"),
    ])
    carts = FakeCartRepository()
    orders = FakeOrderRepository()
    users = FakeUserRepository([make_user(id="u1")])
    AddToCartHandler(carts, products).handle("u1", "1", 2, lens_id="L1")
    return PlaceOrderHandler(orders, carts, users), orders, carts, products


class TestPlaceOrder:

    def test_creates_pending_order_and_clears_cart(self):
        handler, orders, carts, _ = _setup()
        dto = handler.handle("u1", SHIPPING, "card")

        assert dto.id == 1
        assert dto.status == "pending"
        assert dto.total == "₹5000.00"
        assert dto.items[0].lens_name == "ClearBlue Lenses"
        assert dto.payment_method == "card"
        assert orders.get_by_id(1) is not None
        assert carts.get_for_user("u1").is_empty

    def test_price_lock_after_catalog_change(self):
        handler, orders, _, products = _setup()
        dto = handler.handle("u1", SHIPPING, "cod")

        products.get_by_id("1").update_price(Money.of("9999"))

        assert orders.get_by_id(dto.id).total_amount == Money.of("5000")

    def test_second_checkout_with_empty_cart_rejected(self):
        handler, _, _, _ = _setup()
        handler.handle("u1", SHIPPING, "card")
        with pytest.raises(ValidationError, match="cart is empty"):
            handler.handle("u1", SHIPPING, "card")

    def test_unknown_user(self):
        handler, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="User 'ghost'"):
            handler.handle("ghost", SHIPPING, "card")

    def test_unknown_payment_method_keeps_cart(self):
        handler, orders, carts, _ = _setup()
        with pytest.raises(ValidationError, match="Unknown payment method"):
            handler.handle("u1", SHIPPING, "cheque")
        assert carts.get_for_user("u1").count == 2
        assert orders.list_all() == []
