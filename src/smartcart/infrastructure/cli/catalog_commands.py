"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from smartcart.application.browse_catalog import BrowseCatalogHandler
from smartcart.application.dto import ProductDTO
from smartcart.domain.exceptions import DomainException
from smartcart.domain.model.product import Category
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.model.value_objects import Money
from smartcart.infrastructure.bootstrap import product_repository


def display_products(products: list[ProductDTO]) -> None:
    """Shared formatting for product tables."""
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Category':<12} {'Price':>12}")
    click.echo("-" * 63)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<30} {p.category:<12} {str(p.price):>12}")


@click.command("list")
@click.option(
    "--category",
    type=click.Choice(["electronics", "clothing"], case_sensitive=False),
    default=None,
    help="Only show one category.",
)
@click.option(
    "--max-price",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Only show products priced at or below this.",
)
def catalog_list(category: str | None, max_price: float | None) -> None:
    """List products in the catalog."""
    handler = BrowseCatalogHandler(product_repo=product_repository())

    try:
        session = None
        if max_price is not None:
            session = ShoppingSession()
            session.budget.set(Money.of(max_price))
        products = handler.handle(
            session=session,
            category=Category.parse(category) if category else None,
            within_budget=session is not None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_products(products)
