"""In-memory fake repositories and builders for testing.

These implement the same abstract interfaces as the infrastructure
repositories but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from smartcart.domain.model.product import Category, Product
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.model.value_objects import Money
from smartcart.domain.repository.product_repository import ProductRepository
from smartcart.domain.repository.user_repository import UserRepository


def make_product(
    product_id: str = "E101",
    price: str = "100.00",
    name: str | None = None,
    category: Category = Category.ELECTRONICS,
) -> Product:
    return Product(
        id=product_id,
        name=name or f"Product {product_id}",
        price=Money.of(price),
        category=category,
    )


def make_session(username: str = "alice") -> ShoppingSession:
    return ShoppingSession(username=username)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())


class FakeUserRepository(UserRepository):

    def __init__(self, users: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(users or {})

    def exists(self, username: str) -> bool:
        return username in self._store

    def get_password(self, username: str) -> str | None:
        return self._store.get(username)

    def add(self, username: str, password: str) -> None:
        self._store[username] = password
