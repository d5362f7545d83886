"""Product — an entry of the read-only catalog.

Products are supplied by the catalog and never mutated by the engine.
Electronics and clothing behave identically, so the category is a
plain enum tag on a single record type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from smartcart.domain.exceptions import ValidationError
from smartcart.domain.model.value_objects import Money


class Category(Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"

    @staticmethod
    def parse(raw: str) -> Category:
        for category in Category:
            if raw.strip().lower() in (category.name.lower(), category.value.lower()):
                return category
        raise ValidationError(f"Unknown category: {raw!r}")


@dataclass(frozen=True)
class Product:
    """A product in the catalog.  Identity is ``id``."""

    id: str
    name: str
    price: Money
    category: Category

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
