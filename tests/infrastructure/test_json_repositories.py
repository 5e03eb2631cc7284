"""Tests for the JSON-file-backed repositories."""

import json
import logging
from decimal import Decimal

from storefront.domain.model.cart import Cart, Prescription
from storefront.domain.model.order import Order, OrderItem, OrderStatus, PaymentMethod, ShippingAddress
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_product_repository import JsonProductRepository
from storefront.infrastructure.persistence.json_review_repository import JsonReviewRepository
from storefront.infrastructure.persistence.json_user_repository import JsonUserRepository
from tests.fakes import hours_ago, make_lens, make_product, make_user


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        repo = JsonProductRepository(path)
        assert path.read_text(encoding="utf-8") == "[]"
        assert repo.list_all() == []

    def test_save_load_update_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = make_product(id="1")
        product.attributes = {"frameShape": "Aviator"}
        repo.save(product)

        loaded = repo.get_by_name("AVIATOR CLASSIC")
        assert loaded == product

        loaded.update_price(Money.of("1799.50"))
        repo.save(loaded)
        assert len(repo.list_all()) == 1
        assert repo.get_by_id("1").price.amount == Decimal("1799.50")

        assert repo.delete("1") is True
        assert repo.delete("1") is False
        assert repo.get_by_id("1") is None

    def test_stores_document_field_names(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(make_product(id="1"))
        raw = json.loads(path.read_text(encoding="utf-8"))[0]
        assert raw["type"] == "Frames"
        assert raw["imageId"] == "img-1"
        assert raw["price"] == "2000.00"


def _order(user_id: str, hours: int) -> Order:
    order = Order.create(
        user_id,
        [OrderItem("1", "Aviator Classic", Quantity(2), Money.of("2500"), lens_name="ClearBlue Lenses")],
        ShippingAddress("12 MG Road", "Bengaluru", "560001", "India"),
        PaymentMethod.UPI,
    )
    order.order_date = hours_ago(hours)
    return order


class TestJsonOrderRepository:

    def test_assigns_ids_and_round_trips(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order("u1", 1)
        repo.save(order)
        assert order.id == 1

        loaded = repo.get_by_id(1)
        assert loaded.items == order.items
        assert loaded.total_amount == Money.of("5000")
        assert loaded.payment_method is PaymentMethod.UPI
        assert loaded.order_date == order.order_date

    def test_status_update_persists(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(_order("u1", 1))
        order = repo.get_by_id(1)
        order.set_status(OrderStatus.SHIPPED)
        repo.save(order)
        assert repo.get_by_id(1).status is OrderStatus.SHIPPED
        assert len(repo.list_all()) == 1

    def test_listing_is_newest_first(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        for user_id, hours in (("u1", 30), ("u2", 20), ("u1", 10)):
            repo.save(_order(user_id, hours))
        assert [o.id for o in repo.list_all()] == [3, 2, 1]
        assert [o.id for o in repo.list_for_user("u1")] == [3, 1]


class TestJsonCartRepository:

    def _repos(self, tmp_path):
        products = JsonProductRepository(tmp_path / "products.json")
        products.save(make_product(id="1"))
        products.save(make_lens(id="L1"))
        return products, JsonCartRepository(tmp_path / "carts.json", products)

    def test_missing_cart_is_empty(self, tmp_path):
        _, carts = self._repos(tmp_path)
        cart = carts.get_for_user("u1")
        assert cart.user_id == "u1"
        assert cart.is_empty

    def test_round_trip_resolves_current_products(self, tmp_path):
        products, carts = self._repos(tmp_path)
        cart = Cart(user_id="u1")
        rx = Prescription(left_dv="-1.25", right_dv="-1.00")
        cart.add_item(products.get_by_id("1"), 2, lens=products.get_by_id("L1"), prescription=rx)
        carts.save(cart)

        frame = products.get_by_id("1")
        frame.update_price(Money.of("2200"))
        products.save(frame)

        loaded = carts.get_for_user("u1")
        assert loaded.items[0].prescription == rx
        assert loaded.items[0].unit_price == Money.of("2700")
        assert loaded.count == 2

    def test_vanished_product_line_is_dropped(self, tmp_path, caplog):
        products, carts = self._repos(tmp_path)
        cart = Cart(user_id="u1")
        cart.add_item(products.get_by_id("1"), 1, lens=products.get_by_id("L1"))
        cart.add_item(products.get_by_id("1"), 1)
        carts.save(cart)
        products.delete("L1")

        with caplog.at_level(logging.WARNING):
            loaded = carts.get_for_user("u1")

        assert [item.key for item in loaded.items] == [("1", None)]
        assert "Dropping cart line" in caplog.text

    def test_line_in_another_currency_is_dropped(self, tmp_path, caplog):
        products, _ = self._repos(tmp_path)
        cart = Cart(user_id="u1")
        cart.add_item(products.get_by_id("1"), 1)
        JsonCartRepository(tmp_path / "carts.json", products).save(cart)

        usd_carts = JsonCartRepository(tmp_path / "carts.json", products, currency="USD")
        with caplog.at_level(logging.WARNING):
            loaded = usd_carts.get_for_user("u1")

        assert loaded.is_empty
        assert loaded.total == Money.of("0", "USD")
        assert "not priced in USD" in caplog.text


class TestJsonUserAndReviewRepositories:

    def test_users(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        user = make_user(first_name="Alice")
        repo.save(user)
        user.grant_admin()
        repo.save(user)
        assert repo.get_by_email("ALICE@example.com") == user
        assert repo.get_by_id("u1").is_admin
        assert len(repo.list_all()) == 1

    def test_reviews_for_product_newest_first(self, tmp_path):
        repo = JsonReviewRepository(tmp_path / "reviews.json")
        older = Review.create("1", "u1", "Alice", 4, "Good value for money.")
        older.created_at = hours_ago(5)
        newer = Review.create("1", "u2", "Bob", 5, "Best frames I've owned.")
        other = Review.create("2", "u2", "Bob", 3, "Okay, a bit heavy.")
        for review in (older, newer, other):
            repo.save(review)

        assert [r.id for r in repo.list_for_product("1")] == [2, 1]
        assert repo.next_id() == 4
