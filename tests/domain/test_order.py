"""Unit tests for the Order aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    ShippingAddress,
)
from storefront.domain.model.value_objects import Money, Quantity

SHIPPING = ShippingAddress("12 MG Road", "Bengaluru", "560001", "India")


def _item(name: str = "Aviator Classic", qty: int = 1, price: str = "2000.00", lens=None) -> OrderItem:
    return OrderItem(
        product_id="1",
        product_name=name,
        quantity=Quantity(qty),
        price_at_purchase=Money.of(price),
        lens_name=lens,
    )


class TestOrderCreate:

    def test_new_order_is_pending_with_computed_total(self):
        order = Order.create("u1", [_item(qty=2), _item("Wayfarer", price="1500")], SHIPPING, PaymentMethod.CARD)
        assert order.id is None
        assert order.status is OrderStatus.PENDING
        assert order.total_amount == Money.of("5500.00")
        assert order.item_count == 3

    def test_billing_defaults_to_shipping(self):
        order = Order.create("u1", [_item()], SHIPPING, PaymentMethod.COD)
        assert order.shipping_address == "12 MG Road, Bengaluru, 560001, India"
        assert order.billing_address == order.shipping_address

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create("u1", [], SHIPPING, PaymentMethod.CARD)

    def test_user_required(self):
        with pytest.raises(ValidationError, match="belong to a user"):
            Order.create("", [_item()], SHIPPING, PaymentMethod.CARD)


class TestOrderStatus:

    @pytest.mark.parametrize("start", list(OrderStatus))
    @pytest.mark.parametrize("target", list(OrderStatus))
    def test_any_status_can_be_set_from_any_status(self, start, target):
        order = Order.create("u1", [_item()], SHIPPING, PaymentMethod.CARD)
        order.status = start
        assert order.set_status(target) is start
        assert order.status is target

    def test_parse_is_case_insensitive(self):
        assert OrderStatus.parse(" Shipped ") is OrderStatus.SHIPPED

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValidationError, match="Unknown order status 'lost'"):
            OrderStatus.parse("lost")


class TestShippingAddress:

    def test_short_zip_rejected(self):
        with pytest.raises(ValidationError, match="ZIP"):
            ShippingAddress("12 MG Road", "Bengaluru", "5600", "India")

    def test_blank_city_rejected(self):
        with pytest.raises(ValidationError, match="City is required"):
            ShippingAddress("12 MG Road", " ", "560001", "India")


class TestOrderItem:

    def test_line_total(self):
        assert _item(qty=3, price="1000").line_total == Money.of("3000")

    def test_items_are_immutable(self):
        item = _item()
        with pytest.raises(AttributeError):
            item.product_name = "Changed"
