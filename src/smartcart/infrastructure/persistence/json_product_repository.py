"""JSON-file-backed, read-only implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from smartcart.domain.exceptions import EntityNotFoundError
from smartcart.domain.model.product import Category, Product
from smartcart.domain.model.value_objects import DEFAULT_CURRENCY, Money
from smartcart.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):
    """Loads the catalog once; the engine never writes it back."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._products: dict[str, Product] | None = None

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id.strip().upper())

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        if self._products is None:
            if not self._file_path.exists():
                raise EntityNotFoundError(f"Catalog file not found: {self._file_path}")
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            self._products = {
                item["id"].upper(): Product(
                    id=item["id"].upper(),
                    name=item["name"],
                    price=Money(
                        Decimal(str(item["price"])),
                        item.get("currency", DEFAULT_CURRENCY),
                    ),
                    category=Category.parse(item["category"]),
                )
                for item in raw
            }
        return self._products
