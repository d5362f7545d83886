"""Abstract repository for the read-only product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from smartcart.domain.model.product import Category, Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""

    def list_by_category(self, category: Category) -> list[Product]:
        return [p for p in self.list_all() if p.category == category]
