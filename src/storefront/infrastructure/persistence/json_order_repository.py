"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from storefront.domain.model.order import Order, OrderItem, OrderStatus, PaymentMethod
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore


class JsonOrderRepository(JsonDocumentStore, OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._next_int_id()

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_for_user(self, user_id: str) -> list[Order]:
        return self._newest_first(
            self._to_domain(raw) for raw in self._load_raw() if raw["userId"] == user_id
        )

    def list_all(self) -> list[Order]:
        return self._newest_first(self._to_domain(raw) for raw in self._load_raw())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._upsert_raw("id", self._to_raw(order))

    @staticmethod
    def _newest_first(orders) -> list[Order]:
        return sorted(orders, key=lambda o: (o.order_date, o.id), reverse=True)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "userId": order.user_id,
            "orderDate": order.order_date.isoformat(),
            "totalAmount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "status": order.status.value,
            "shippingAddress": order.shipping_address,
            "billingAddress": order.billing_address,
            "paymentMethod": order.payment_method.value if order.payment_method else None,
            "items": [
                {
                    "productId": item.product_id,
                    "productName": item.product_name,
                    "lensName": item.lens_name,
                    "quantity": item.quantity.value,
                    "priceAtPurchase": str(item.price_at_purchase.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        items = [
            OrderItem(
                product_id=i["productId"],
                product_name=i["productName"],
                quantity=Quantity(i["quantity"]),
                price_at_purchase=Money(Decimal(i["priceAtPurchase"]), currency),
                lens_name=i.get("lensName"),
            )
            for i in raw["items"]
        ]
        method = raw.get("paymentMethod")
        return Order(
            id=raw["id"],
            user_id=raw["userId"],
            items=items,
            total_amount=Money(Decimal(raw["totalAmount"]), currency),
            status=OrderStatus(raw["status"]),
            order_date=datetime.fromisoformat(raw["orderDate"]),
            shipping_address=raw.get("shippingAddress"),
            billing_address=raw.get("billingAddress"),
            payment_method=PaymentMethod(method) if method else None,
        )
