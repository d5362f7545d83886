"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from smartcart.application.dto import ProductDTO, product_to_dto
from smartcart.domain.model.product import Category
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.repository.product_repository import ProductRepository


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        session: ShoppingSession | None = None,
        category: Category | None = None,
        within_budget: bool = False,
    ) -> list[ProductDTO]:
        """List catalog products, optionally by category.

        With ``within_budget`` and a session whose budget is set, only
        products priced at or below the limit are returned.
        """
        if category is not None:
            products = self._product_repo.list_by_category(category)
        else:
            products = self._product_repo.list_all()

        if within_budget and session is not None:
            products = [p for p in products if session.budget.allows(p.price)]

        return [product_to_dto(p) for p in products]
