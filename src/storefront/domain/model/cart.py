"""Cart aggregate.

A cart belongs to one user and holds line items keyed by the pair
``(product id, lens id or None)``. The same frame with two different
lenses is two lines; adding an existing pair again bumps its quantity.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity

CartKey = tuple[str, "str | None"]


@dataclass(frozen=True)
class Prescription:
    """Either an uploaded prescription reference or manual readings.

    DV/NV are the distance and near vision readings per eye, kept as the
    customer typed them.
    """

    file: str | None = None
    left_dv: str | None = None
    right_dv: str | None = None
    left_nv: str | None = None
    right_nv: str | None = None

    @property
    def is_empty(self) -> bool:
        return not any(
            (self.file, self.left_dv, self.right_dv, self.left_nv, self.right_nv)
        )


@dataclass
class CartItem:
    product: Product
    quantity: Quantity
    lens: Product | None = None
    prescription: Prescription | None = None

    @property
    def key(self) -> CartKey:
        return (self.product.id, self.lens.id if self.lens else None)

    @property
    def unit_price(self) -> Money:
        if self.lens is None:
            return self.product.price
        return self.product.price + self.lens.price

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for a user's pending purchase.

    Invariants:
    - no two items share a key
    - every item quantity is >= 1 (a line dropping to zero is removed)
    """

    user_id: str
    items: list[CartItem] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY

    def add_item(
        self,
        product: Product,
        quantity: int,
        lens: Product | None = None,
        prescription: Prescription | None = None,
    ) -> CartItem:
        """Add units of a product (optionally fitted with a lens).

        Returns the line that now holds them.
        """
        qty = Quantity(quantity)
        if lens is not None and not lens.is_lens:
            raise ValidationError(f"'{lens.name}' is not a lens")
        for priced in (product, lens):
            if priced is not None and not self.accepts(priced):
                raise ValidationError(
                    f"'{priced.name}' is priced in {priced.price.currency}, "
                    f"the cart uses {self.currency}"
                )
        if prescription is not None and prescription.is_empty:
            prescription = None

        key = (product.id, lens.id if lens else None)
        existing = self._find(key)
        if existing is not None:
            existing.quantity = existing.quantity + qty
            if prescription is not None:
                existing.prescription = prescription
            return existing

        item = CartItem(product=product, quantity=qty, lens=lens, prescription=prescription)
        self.items.append(item)
        return item

    def remove_item(self, product_id: str, lens_id: str | None = None) -> bool:
        """Drop the matching line. Returns False if there was none."""
        before = len(self.items)
        self.items = [item for item in self.items if item.key != (product_id, lens_id)]
        return len(self.items) != before

    def update_quantity(
        self, product_id: str, quantity: int, lens_id: str | None = None
    ) -> bool:
        """Set a line's quantity; zero or less removes the line.

        Returns False, changing nothing, if there is no such line.
        """
        item = self._find((product_id, lens_id))
        if item is None:
            return False
        if quantity <= 0:
            return self.remove_item(product_id, lens_id)
        item.quantity = Quantity(quantity)
        return True

    def accepts(self, product: Product) -> bool:
        """Whether the product is priced in this cart's currency."""
        return product.price.currency == self.currency

    def clear(self) -> None:
        self.items = []

    @property
    def total(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def _find(self, key: CartKey) -> CartItem | None:
        for item in self.items:
            if item.key == key:
                return item
        return None

