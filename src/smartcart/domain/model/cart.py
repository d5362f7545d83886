"""Cart — the shopper's current selections."""

from __future__ import annotations

from smartcart.domain.model.product import Product
from smartcart.domain.model.value_objects import Money


class Cart:
    """Ordered, de-duplicated collection of products keyed by product id.

    Invariants:
    - at most one entry per product id (re-adding replaces in place)
    - iteration follows insertion order
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._items: dict[str, Product] = {}
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> None:
        self._items[product.id] = product

    def remove(self, product_id: str) -> None:
        """Remove a product if present.  Removing an absent id is a no-op."""
        self._items.pop(product_id, None)

    def clear(self) -> None:
        self._items.clear()

    def contains(self, product_id: str) -> bool:
        return product_id in self._items

    @property
    def items(self) -> list[Product]:
        return list(self._items.values())

    @property
    def total(self) -> Money:
        result = Money.zero()
        for product in self._items.values():
            result = result + product.price
        return result

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)
